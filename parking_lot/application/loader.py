from pathlib import Path
from typing import List, Optional, Tuple
from loguru import logger

from parking_lot.config.settings_env import settings
from parking_lot.domain.common import CarType
from parking_lot.domain.entities import Vehicle
from parking_lot.domain.exceptions import InvalidPlacementError, MalformedInputError
from parking_lot.domain.lot import ParkingLot


def _calculate_dimensions(lines: List[str], delimiter: str, separator: str) -> Tuple[int, int]:
    num_rows = 0
    num_cols = 0

    for line in lines:
        if line == delimiter:
            return num_rows, num_cols
        if not line:
            continue
        num_rows += 1
        if num_cols == 0:
            num_cols = len(line.split(separator))

    raise MalformedInputError(f"Missing section delimiter {delimiter!r}")


def _parse_design_row(line: str, num_cols: int, separator: str) -> List[CarType]:
    fields = line.split(separator)
    # Trailing empty fields don't count as spots
    while fields and not fields[-1].strip():
        fields.pop()

    row = [CarType.NA] * num_cols
    for j, label in enumerate(fields[:num_cols]):
        try:
            row[j] = CarType.from_label(label)
        except ValueError as e:
            raise MalformedInputError(f"Invalid lot design row {line!r}: {e}") from e
    return row


def _parse_parked_car(fields: List[str]) -> Tuple[int, int, Vehicle]:
    row = int(fields[0].strip())
    column = int(fields[1].strip())
    vehicle = Vehicle(category=CarType.from_label(fields[2]), plate=fields[3].strip())
    return row, column, vehicle


def load(text: str, delimiter: Optional[str] = None, separator: Optional[str] = None) -> ParkingLot:
    """
    Build a parking lot from its textual description.

    The text holds one line of spot labels per row, a delimiter line, then
    zero or more ``row,column,label,plate`` lines for cars already parked.
    Cars that cannot be parked where the file says are reported and skipped.

    Raises:
        MalformedInputError: If the delimiter is missing or the design
            section is empty or contains unknown labels
    """
    delimiter = delimiter or settings.SECTION_DELIMITER
    separator = separator or settings.FIELD_SEPARATOR
    lines = [line.strip() for line in text.splitlines()]

    num_rows, num_cols = _calculate_dimensions(lines, delimiter, separator)
    if num_rows == 0:
        raise MalformedInputError("Lot design section is empty")
    logger.debug(f"Lot dimensions: {num_rows} rows x {num_cols} spots per row")

    design: List[List[CarType]] = []
    index = 0
    for index, line in enumerate(lines):
        if line == delimiter:
            break
        if line:
            design.append(_parse_design_row(line, num_cols, separator))

    lot = ParkingLot(design)

    for line in lines[index + 1:]:
        if not line:
            continue

        fields = line.split(separator)
        if len(fields) != 4:
            continue

        try:
            row, column, vehicle = _parse_parked_car(fields)
        except ValueError as e:
            logger.warning(f"Skipping unreadable parked car entry {line!r}: {e}")
            continue

        try:
            lot.park(row, column, vehicle)
        except InvalidPlacementError:
            logger.warning(f"Car {vehicle.plate} cannot be parked at ({row}, {column})")

    logger.info(f"Loaded lot with capacity {lot.total_capacity()} and {lot.total_occupancy()} parked cars")
    return lot


def load_file(path: str | Path) -> ParkingLot:
    """
    Load a parking lot from a file.

    Raises:
        FileNotFoundError: If the lot file doesn't exist
        MalformedInputError: If the file is not UTF-8 text or cannot be parsed
    """
    lot_path = Path(path)

    if not lot_path.exists():
        raise FileNotFoundError(f"Lot file not found: {lot_path}")

    with open(lot_path, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Lot file {lot_path} is not valid UTF-8 text") from e

    return load(text)
