from .almanac import (
    DEFAULT_EPHEMERIS,
    ReferenceComparison,
    compare_with_reference,
    load_ephemeris,
    reference_sun_times,
)

__all__ = [
    "DEFAULT_EPHEMERIS",
    "ReferenceComparison",
    "compare_with_reference",
    "load_ephemeris",
    "reference_sun_times",
]
