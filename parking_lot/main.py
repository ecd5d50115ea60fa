import sys
from loguru import logger

from parking_lot.application.services import LotService
from parking_lot.config.settings_env import settings
from parking_lot.domain.exceptions import MalformedInputError
from parking_lot.shared.utils import initialize_logger


def main() -> int:
    initialize_logger()

    try:
        filename = settings.LOT_FILE or input("Please enter the name of the file to process: ").strip()
    except EOFError:
        logger.error("No lot file name given")
        return 1

    try:
        service = LotService.from_file(filename)
    except (OSError, MalformedInputError) as e:
        logger.error(str(e))
        return 1

    print(service.build_report(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
