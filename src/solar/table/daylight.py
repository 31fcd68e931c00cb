from datetime import date, timedelta

import numpy as np

from ..calculator import calculate_request
from ..errors import SolarError
from ..models import CalculationRequest, CalculationResult, Coordinate, Zenith

SECONDS_PER_HOUR = 3600.0


def daylight_table(
    start: date,
    days: int,
    latitude: float,
    longitude: float,
    zenith: Zenith = Zenith.CIVIL,
) -> list[tuple[date, CalculationResult]]:
    """Calculate sunrise/sunset for consecutive civil dates.

    Args:
        start: First civil date
        days: Number of dates to calculate (at least 1)
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        zenith: Zenith defining the events

    Returns:
        List of (date, CalculationResult) rows in date order

    Raises:
        SolarError: If days is less than 1
        InvalidCoordinateError: If the coordinate is invalid
    """
    if days < 1:
        raise SolarError(
            f"Number of days must be at least 1, got {days}",
            suggestions=["Pass --days 1 or more"],
        )

    coordinate = Coordinate(latitude=latitude, longitude=longitude)

    rows = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        result = calculate_request(CalculationRequest(day, coordinate, zenith))
        rows.append((day, result))
    return rows


def day_lengths_hours(rows: list[tuple[date, CalculationResult]]) -> np.ndarray:
    """Day length in hours per row, NaN where sunrise or sunset is absent."""
    lengths = np.full(len(rows), np.nan, dtype=np.float64)
    for i, (_, result) in enumerate(rows):
        day_length = result.day_length
        if day_length is not None:
            lengths[i] = day_length.total_seconds() / SECONDS_PER_HOUR
    return lengths


def polar_dates(rows: list[tuple[date, CalculationResult]]) -> list[date]:
    """Dates on which neither sunrise nor sunset occurs."""
    return [day for day, result in rows if result.is_polar]
