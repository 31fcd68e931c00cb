from dataclasses import dataclass
import math

from ..errors import InvalidCoordinateError


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self):
        if not is_valid_coordinate(self.latitude, self.longitude):
            raise InvalidCoordinateError(self.latitude, self.longitude)


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """Check latitude/longitude ranges in degrees; NaN and infinities are invalid."""
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return False
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0
