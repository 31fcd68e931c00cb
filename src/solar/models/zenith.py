from enum import Enum

from ..errors import UnknownZenithError


class Zenith(Enum):
    """Angle from the vertical at which the sun counts as rising or setting."""

    OFFICIAL = 90.83
    CIVIL = 96.0
    NAUTICAL = 102.0
    ASTRONOMICAL = 108.0

    @property
    def degrees(self) -> float:
        return self.value

    @property
    def horizon_degrees(self) -> float:
        """Altitude of the sun's centre at the event, negative below the horizon."""
        return 90.0 - self.value

    @classmethod
    def from_name(cls, name: str) -> "Zenith":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnknownZenithError(name, [z.name.lower() for z in cls])
