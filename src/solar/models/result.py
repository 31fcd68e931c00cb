from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .event import SolarEvent


@dataclass(frozen=True)
class CalculationResult:
    sunrise: Optional[datetime]
    sunset: Optional[datetime]

    def get(self, event: SolarEvent) -> Optional[datetime]:
        return self.sunrise if event is SolarEvent.SUNRISE else self.sunset

    @property
    def day_length(self) -> Optional[timedelta]:
        """Time from sunrise to sunset, or None if either is absent.

        Near the date line the two events can be assigned to different civil
        dates, so this is not always less than a day.
        """
        if self.sunrise is None or self.sunset is None:
            return None
        return self.sunset - self.sunrise

    @property
    def is_polar(self) -> bool:
        return self.sunrise is None and self.sunset is None
