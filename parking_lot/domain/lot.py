from typing import Dict, List, Optional, Sequence, Tuple
from loguru import logger

from parking_lot.domain.common import CarType
from parking_lot.domain.entities import Vehicle
from parking_lot.domain.exceptions import InvalidPlacementError
from parking_lot.domain.rules import can_park


class ParkingLot:
    """A fixed-size grid of parking spots and the vehicles parked in them.

    The design (spot category per cell) is frozen at construction time; only
    the occupancy changes, through ``park`` and ``remove``.
    """

    def __init__(self, design: Sequence[Sequence[CarType]]):
        self._design: Tuple[Tuple[CarType, ...], ...] = tuple(tuple(row) for row in design)
        self._rows = len(self._design)
        self._cols = len(self._design[0]) if self._design else 0
        if any(len(row) != self._cols for row in self._design):
            raise ValueError("Lot design must be rectangular")

        self._occupancy: List[List[Optional[Vehicle]]] = [
            [None] * self._cols for _ in range(self._rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self._rows and 0 <= j < self._cols

    def spot_type(self, i: int, j: int) -> CarType:
        if not self._in_bounds(i, j):
            raise IndexError(f"Spot ({i}, {j}) is outside the lot")
        return self._design[i][j]

    def vehicle_at(self, i: int, j: int) -> Optional[Vehicle]:
        if not self._in_bounds(i, j):
            raise IndexError(f"Spot ({i}, {j}) is outside the lot")
        return self._occupancy[i][j]

    def can_park_at(self, i: int, j: int, vehicle: Vehicle) -> bool:
        if not self._in_bounds(i, j) or self._occupancy[i][j] is not None:
            return False
        return can_park(self._design[i][j], vehicle.category)

    def park(self, i: int, j: int, vehicle: Vehicle) -> None:
        if not self.can_park_at(i, j, vehicle):
            raise InvalidPlacementError(f"Car {vehicle.plate} cannot be parked at ({i}, {j})")

        self._occupancy[i][j] = vehicle
        logger.trace(f"Parked {vehicle} at ({i}, {j})")

    def remove(self, i: int, j: int) -> Optional[Vehicle]:
        """Free the spot at (i, j).

        Returns the removed vehicle, or None when the coordinates are out of
        range or nothing is parked there.
        """
        if not self._in_bounds(i, j) or self._occupancy[i][j] is None:
            return None

        vehicle = self._occupancy[i][j]
        self._occupancy[i][j] = None
        logger.trace(f"Removed {vehicle} from ({i}, {j})")
        return vehicle

    def total_capacity(self) -> int:
        return sum(1 for row in self._design for spot in row if spot != CarType.NA)

    def total_occupancy(self) -> int:
        return sum(1 for row in self._occupancy for vehicle in row if vehicle is not None)

    def available_spots(self) -> int:
        return self.total_capacity() - self.total_occupancy()

    def capacity_by_type(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for row in self._design:
            for spot in row:
                if spot != CarType.NA:
                    counts[spot.label] = counts.get(spot.label, 0) + 1
        return counts

    def render(self) -> str:
        lines = ["==== Lot Design ===="]
        for row in self._design:
            lines.append(", ".join(spot.label for spot in row))

        lines.append("")
        lines.append("==== Parking Occupancy ====")
        for i in range(self._rows):
            for j in range(self._cols):
                vehicle = self._occupancy[i][j]
                lines.append(f"({i}, {j}): {vehicle if vehicle is not None else 'Unoccupied'}")

        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
