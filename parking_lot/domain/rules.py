from parking_lot.domain.common import CarType


def can_park(spot_type: CarType, car_type: CarType) -> bool:
    """Decide whether a vehicle of ``car_type`` may use a spot of ``spot_type``.

    Electric vehicles may use any usable spot, electric spots are reserved for
    electric vehicles, and the remaining spots accept vehicles no larger than
    themselves (LARGE > REGULAR > SMALL).
    """
    if spot_type == CarType.NA:
        return False
    if car_type == CarType.ELECTRIC:
        return True
    if spot_type == CarType.ELECTRIC:
        return False
    if spot_type == CarType.SMALL:
        return car_type == CarType.SMALL
    if spot_type == CarType.REGULAR:
        return car_type in (CarType.SMALL, CarType.REGULAR)
    if spot_type == CarType.LARGE:
        return True
    return False
