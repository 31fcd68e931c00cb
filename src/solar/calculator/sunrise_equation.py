"""Sunrise and sunset times from the classical Sunrise Equation.

The approximation follows the Almanac for Computers (1990) solar algorithm:
the sun's mean anomaly, true longitude, right ascension and declination are
estimated for an approximate event time, and the local hour angle at which
the sun's centre crosses the requested zenith is solved for. Accuracy is
around a minute for latitudes outside the polar circles.

All angles are held in degrees and converted to radians only where a
trigonometric function is called.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone
import math
from typing import Optional

from ..models import (
    CalculationRequest,
    CalculationResult,
    Coordinate,
    SolarEvent,
    Zenith,
)

LENGTH_OF_DAY = timedelta(days=1)

DEGREES_PER_HOUR = 15.0
FULL_CIRCLE_DEG = 360.0
HOURS_PER_DAY = 24.0


@dataclass(frozen=True)
class SolveTrace:
    """Intermediate quantities of a single sunrise or sunset solve."""

    event: SolarEvent
    day_of_year: int
    approximate_time: float
    mean_anomaly_deg: float
    true_longitude_deg: float
    right_ascension_hours: float
    cos_hour_angle: float
    universal_time_hours: Optional[float] = None
    instant: Optional[datetime] = None


def calculate(
    day: date,
    latitude: float,
    longitude: float,
    zenith: Zenith = Zenith.CIVIL,
) -> CalculationResult:
    """Calculate sunrise and sunset for a civil date at a coordinate.

    Args:
        day: Civil calendar date; its day of year is used as-is, no UTC shift
        latitude: Latitude in degrees, positive north
        longitude: Longitude in degrees, positive east
        zenith: Zenith defining the event (official, civil, nautical, astronomical)

    Returns:
        CalculationResult with UTC sunrise/sunset; either is None when the sun
        does not cross the zenith that day (polar day or polar night)

    Raises:
        InvalidCoordinateError: If latitude/longitude are out of range or not finite
    """
    coordinate = Coordinate(latitude=latitude, longitude=longitude)
    return calculate_request(CalculationRequest(day, coordinate, zenith))


def calculate_request(request: CalculationRequest) -> CalculationResult:
    """Calculate sunrise and sunset for a prebuilt request."""
    sunrise = solve_event(
        SolarEvent.SUNRISE, request.date, request.coordinate, request.zenith
    )
    sunset = solve_event(
        SolarEvent.SUNSET, request.date, request.coordinate, request.zenith
    )
    return CalculationResult(sunrise=sunrise.instant, sunset=sunset.instant)


def solve_event(
    event: SolarEvent, day: date, coordinate: Coordinate, zenith: Zenith
) -> SolveTrace:
    """Solve the Sunrise Equation for one event and keep the intermediate state.

    Returns:
        SolveTrace whose ``instant`` is None when cos(H) falls outside [-1, 1]
    """
    day_of_year = day.timetuple().tm_yday

    lng_hour = coordinate.longitude / DEGREES_PER_HOUR
    t = day_of_year + ((event.approximate_hour - lng_hour) / HOURS_PER_DAY)

    mean_anomaly = (0.9856 * t) - 3.289

    true_longitude = (
        mean_anomaly
        + 1.916 * _sin(mean_anomaly)
        + 0.020 * _sin(2 * mean_anomaly)
        + 282.634
    )
    true_longitude = normalise(true_longitude, FULL_CIRCLE_DEG)

    right_ascension = math.degrees(math.atan(0.91764 * _tan(true_longitude)))
    right_ascension = normalise(right_ascension, FULL_CIRCLE_DEG)

    # atan drops the quadrant; put RA in the same 90° quadrant as L
    l_quadrant = math.floor(true_longitude / 90.0) * 90.0
    ra_quadrant = math.floor(right_ascension / 90.0) * 90.0
    right_ascension = (right_ascension + (l_quadrant - ra_quadrant)) / DEGREES_PER_HOUR

    sin_dec = 0.39782 * _sin(true_longitude)
    cos_dec = math.cos(math.asin(sin_dec))

    cos_h = (_cos(zenith.degrees) - (sin_dec * _sin(coordinate.latitude))) / (
        cos_dec * _cos(coordinate.latitude)
    )

    trace = SolveTrace(
        event=event,
        day_of_year=day_of_year,
        approximate_time=t,
        mean_anomaly_deg=mean_anomaly,
        true_longitude_deg=true_longitude,
        right_ascension_hours=right_ascension,
        cos_hour_angle=cos_h,
    )

    if not _crosses_zenith(cos_h):
        return trace

    hour_angle = _hour_angle_hours(event, cos_h)

    local_mean_time = hour_angle + right_ascension - (0.06571 * t) - 6.622

    universal_time = normalise(local_mean_time - lng_hour, HOURS_PER_DAY)

    return replace(
        trace,
        universal_time_hours=universal_time,
        instant=_assemble_instant(event, day, lng_hour, universal_time),
    )


def _crosses_zenith(cos_h: float) -> bool:
    """Whether the sun reaches the zenith at all; cos(H) of exactly 1 or -1 counts.

    Above 1 the sun never reaches the zenith, below -1 it never drops below it.
    """
    return -1 <= cos_h <= 1


def _hour_angle_hours(event: SolarEvent, cos_h: float) -> float:
    """Local hour angle of the event in hours."""
    hour_angle = math.degrees(math.acos(cos_h))
    if event is SolarEvent.SUNRISE:
        hour_angle = FULL_CIRCLE_DEG - hour_angle
    return hour_angle / DEGREES_PER_HOUR


def _assemble_instant(
    event: SolarEvent, day: date, lng_hour: float, universal_time: float
) -> datetime:
    """Build the UTC instant, moving to the neighbouring civil day when needed.

    East of Greenwich an early-morning local sunrise lands in the previous UTC
    afternoon; west of it an evening sunset lands in the next UTC morning.
    """
    hour = math.floor(universal_time)
    minute = math.floor((universal_time - hour) * 60.0)
    second = (((universal_time - hour) * 60.0) - minute) * 60.0

    should_be_yesterday = (
        lng_hour > 0 and universal_time > 12 and event is SolarEvent.SUNRISE
    )
    should_be_tomorrow = (
        lng_hour < 0 and universal_time < 12 and event is SolarEvent.SUNSET
    )

    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    if should_be_yesterday:
        midnight -= LENGTH_OF_DAY
    elif should_be_tomorrow:
        midnight += LENGTH_OF_DAY

    # timedelta carries an hour of 24 into the following day
    return midnight + timedelta(hours=hour, minutes=minute, seconds=int(second))


def normalise(value: float, maximum: float) -> float:
    """Bring value into [0, maximum] by adding or subtracting maximum.

    A value sitting exactly on either bound is returned unchanged. Values more
    than one period out of range keep being corrected until they fit.
    """
    while value < 0:
        value += maximum
    while value > maximum:
        value -= maximum
    return value


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def _cos(degrees: float) -> float:
    return math.cos(math.radians(degrees))


def _tan(degrees: float) -> float:
    return math.tan(math.radians(degrees))
