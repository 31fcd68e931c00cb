from dataclasses import dataclass
from datetime import date

from .coordinate import Coordinate
from .zenith import Zenith


@dataclass(frozen=True)
class CalculationRequest:
    date: date
    coordinate: Coordinate
    zenith: Zenith = Zenith.CIVIL
