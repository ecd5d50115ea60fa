import sys

import pytest
from loguru import logger

from parking_lot.application.loader import load
from parking_lot.domain.common import CarType
from parking_lot.domain.entities import Vehicle
from parking_lot.domain.lot import ParkingLot


SAMPLE_LOT = """
S, R, L
E, N, R

###
0, 0, S, SMALL1
0, 2, L, LARGE1
1, 0, E, ELEC1
"""


@pytest.fixture
def small_lot():
    """A 2x2 lot with one unusable spot."""
    return ParkingLot([
        [CarType.SMALL, CarType.REGULAR],
        [CarType.LARGE, CarType.NA],
    ])


@pytest.fixture
def sample_lot():
    return load(SAMPLE_LOT)


@pytest.fixture
def small_car():
    return Vehicle(category=CarType.SMALL, plate="SML001")


@pytest.fixture
def regular_car():
    return Vehicle(category=CarType.REGULAR, plate="REG001")


@pytest.fixture
def electric_car():
    return Vehicle(category=CarType.ELECTRIC, plate="EV001")


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="TRACE")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore a plain stderr handler after tests that reconfigure loguru."""
    yield
    logger.remove()
    logger.add(sys.stderr)
