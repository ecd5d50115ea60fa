class ParkingLotError(ValueError):
    """Base error for parking lot operations."""


class MalformedInputError(ParkingLotError):
    """The lot description could not be parsed into a grid."""


class InvalidPlacementError(ParkingLotError):
    """A vehicle cannot be parked at the requested spot."""
