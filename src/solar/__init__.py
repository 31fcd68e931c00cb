__version__ = "0.1.0"

from .calculator import calculate, calculate_request
from .errors import InvalidCoordinateError, SolarError
from .models import (
    CalculationRequest,
    CalculationResult,
    Coordinate,
    SolarEvent,
    Zenith,
)

__all__ = [
    "__version__",
    "calculate",
    "calculate_request",
    "CalculationRequest",
    "CalculationResult",
    "Coordinate",
    "SolarEvent",
    "Zenith",
    "SolarError",
    "InvalidCoordinateError",
]
