from .sunrise_equation import (
    LENGTH_OF_DAY,
    SolveTrace,
    calculate,
    calculate_request,
    normalise,
    solve_event,
)

__all__ = [
    "LENGTH_OF_DAY",
    "SolveTrace",
    "calculate",
    "calculate_request",
    "normalise",
    "solve_event",
]
