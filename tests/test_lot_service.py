import pytest
from pydantic import ValidationError

from parking_lot.application.services import LotService
from parking_lot.domain.common import CarType
from parking_lot.domain.lot import ParkingLot
from parking_lot.schemas.lot import LotStatus


def test_get_lot_status(sample_lot):
    status = LotService(sample_lot).get_lot_status()

    assert status.rows == 2
    assert status.cols == 3
    assert status.total_spots == 5
    assert status.occupied_spots == 3
    assert status.available_spots == 2
    assert status.occupancy_rate == 60.0
    assert status.spots_by_type == {"S": 1, "R": 2, "L": 1, "E": 1}


def test_get_lot_status_no_capacity():
    lot = ParkingLot([[CarType.NA, CarType.NA]])
    status = LotService(lot).get_lot_status()
    assert status.total_spots == 0
    assert status.occupancy_rate == 0
    assert status.spots_by_type == {}


def test_lot_status_rejects_negative_counts():
    with pytest.raises(ValidationError):
        LotStatus(
            rows=-1, cols=0, total_spots=0, occupied_spots=0,
            available_spots=0, occupancy_rate=0.0, spots_by_type={},
        )


def test_build_report(small_lot):
    report = LotService(small_lot).build_report()
    assert report.startswith(
        "Total number of parkable spots (capacity): 3\n"
        "Number of cars currently parked in the lot: 0\n"
        "==== Lot Design ====\n"
    )
    assert report.endswith("(1, 1): Unoccupied\n")


def test_from_file(tmp_path):
    lot_file = tmp_path / "lot.inf"
    lot_file.write_text("S,L\n###\n0,1,R,REG1\n", encoding="utf-8")

    service = LotService.from_file(lot_file)

    assert service.lot.total_occupancy() == 1


def test_available_spots_follow_lot(small_lot, small_car):
    small_lot.park(0, 0, small_car)
    status = LotService(small_lot).get_lot_status()
    assert status.available_spots == small_lot.available_spots() == 2
