from .coordinate import Coordinate
from .zenith import Zenith
from .event import SolarEvent
from .request import CalculationRequest
from .result import CalculationResult

__all__ = [
    "Coordinate",
    "Zenith",
    "SolarEvent",
    "CalculationRequest",
    "CalculationResult",
]
