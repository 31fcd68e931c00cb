from enum import Enum


class SolarEvent(Enum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"

    @property
    def approximate_hour(self) -> float:
        """Local hour the event is first guessed at before solving."""
        return 6.0 if self is SolarEvent.SUNRISE else 18.0
