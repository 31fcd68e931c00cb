"""Cross-check of the Sunrise Equation against skyfield's almanac.

skyfield integrates the JPL ephemeris, so its risings and settings are good to
well under a second and make a reference for the approximation's error.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from skyfield import almanac
from skyfield.api import load, wgs84

from ..calculator import LENGTH_OF_DAY, calculate_request
from ..errors import EphemerisUnavailableError
from ..models import CalculationRequest, CalculationResult, Coordinate, SolarEvent, Zenith

DEFAULT_EPHEMERIS = "de421.bsp"


@dataclass(frozen=True)
class ReferenceComparison:
    approximate: CalculationResult
    reference: CalculationResult
    sunrise_delta_s: Optional[float]
    sunset_delta_s: Optional[float]


def load_ephemeris(name: str = DEFAULT_EPHEMERIS):
    """Load a JPL ephemeris, downloading it on first use.

    Raises:
        EphemerisUnavailableError: If the file cannot be read or downloaded
    """
    try:
        return load(name)
    except (OSError, ValueError) as e:
        raise EphemerisUnavailableError(name, str(e)) from e


def reference_sun_times(
    day: date,
    coordinate: Coordinate,
    zenith: Zenith,
    ephemeris,
    approximate: Optional[CalculationResult] = None,
) -> CalculationResult:
    """Find sunrise/sunset for a civil date with skyfield's almanac.

    Risings and settings are searched from the day before to the day after the
    requested date. When an approximate result is given, the occurrence closest
    to each approximate instant is chosen; otherwise the first occurrence on
    the requested UTC date.

    Without an approximate result no date-line rollover is applied. Far east of
    Greenwich, where the Sunrise Equation assigns the sunrise to the previous
    UTC afternoon, the sunrise returned here is the one on the requested UTC
    date instead, about a day later. Pass the approximate result (as
    compare_with_reference does) to match the same event.

    Args:
        day: Civil date
        coordinate: Observer position
        zenith: Zenith defining the events
        ephemeris: Ephemeris returned by load_ephemeris
        approximate: Optional Sunrise Equation result to match against

    Returns:
        CalculationResult with the reference instants, truncated to seconds
    """
    ts = load.timescale()
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    t0 = ts.from_datetime(midnight - LENGTH_OF_DAY)
    t1 = ts.from_datetime(midnight + 2 * LENGTH_OF_DAY)

    observer = ephemeris["earth"] + wgs84.latlon(
        coordinate.latitude, coordinate.longitude
    )
    sun = ephemeris["sun"]

    found = {}
    for event, finder in (
        (SolarEvent.SUNRISE, almanac.find_risings),
        (SolarEvent.SUNSET, almanac.find_settings),
    ):
        times, occurred = finder(
            observer, sun, t0, t1, horizon_degrees=zenith.horizon_degrees
        )
        candidates = [
            dt.replace(microsecond=0)
            for dt, ok in zip(times.utc_datetime(), occurred)
            if ok
        ]
        target = approximate.get(event) if approximate is not None else None
        found[event] = _pick(candidates, day, target)

    return CalculationResult(
        sunrise=found[SolarEvent.SUNRISE], sunset=found[SolarEvent.SUNSET]
    )


def _pick(
    candidates: list[datetime], day: date, target: Optional[datetime]
) -> Optional[datetime]:
    if target is not None:
        if not candidates:
            return None
        return min(candidates, key=lambda dt: abs(dt - target))
    for dt in candidates:
        if dt.date() == day:
            return dt
    return None


def _delta_seconds(
    approximate: Optional[datetime], reference: Optional[datetime]
) -> Optional[float]:
    if approximate is None or reference is None:
        return None
    return (approximate - reference).total_seconds()


def compare_with_reference(
    day: date, coordinate: Coordinate, zenith: Zenith, ephemeris
) -> ReferenceComparison:
    """Compare the Sunrise Equation result with skyfield's almanac.

    Deltas are approximate minus reference, in seconds; None where either
    side has no event.
    """
    approximate = calculate_request(CalculationRequest(day, coordinate, zenith))
    reference = reference_sun_times(day, coordinate, zenith, ephemeris, approximate)
    return ReferenceComparison(
        approximate=approximate,
        reference=reference,
        sunrise_delta_s=_delta_seconds(approximate.sunrise, reference.sunrise),
        sunset_delta_s=_delta_seconds(approximate.sunset, reference.sunset),
    )
