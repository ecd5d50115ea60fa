from pathlib import Path
from loguru import logger

from parking_lot.application.loader import load_file
from parking_lot.domain.lot import ParkingLot
from parking_lot.schemas.lot import LotStatus


class LotService:
    def __init__(self, lot: ParkingLot):
        self.lot = lot

    @classmethod
    def from_file(cls, path: str | Path) -> "LotService":
        logger.info(f"Loading parking lot from {path}")
        return cls(load_file(path))

    def get_lot_status(self) -> LotStatus:
        total_spots = self.lot.total_capacity()
        occupied_spots = self.lot.total_occupancy()
        occupancy_rate = (occupied_spots / total_spots * 100) if total_spots > 0 else 0

        return LotStatus(
            rows=self.lot.rows,
            cols=self.lot.cols,
            total_spots=total_spots,
            occupied_spots=occupied_spots,
            available_spots=self.lot.available_spots(),
            occupancy_rate=round(occupancy_rate, 2),
            spots_by_type=self.lot.capacity_by_type(),
        )

    def build_report(self) -> str:
        return (
            f"Total number of parkable spots (capacity): {self.lot.total_capacity()}\n"
            f"Number of cars currently parked in the lot: {self.lot.total_occupancy()}\n"
            f"{self.lot.render()}"
        )
