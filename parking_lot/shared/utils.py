import sys
from loguru import logger as loguru_logger

from parking_lot.config.settings_env import settings


def initialize_logger():
    """Initialize the logger from settings.

    LOG_LEVEL wins when set; otherwise DEV_MODE selects TRACE and
    production selects INFO.
    """
    loguru_logger.remove()

    level = settings.LOG_LEVEL or ("TRACE" if settings.DEV_MODE else "INFO")
    loguru_logger.add(sys.stderr, level=level.upper())

    return loguru_logger
