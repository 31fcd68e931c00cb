from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    from ..models import CalculationRequest, CalculationResult, Coordinate

TIME_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def format_coordinate(coordinate: "Coordinate") -> str:
    """Format a coordinate as e.g. ``51.5074°N, 0.1278°W``."""
    lat = coordinate.latitude
    lon = coordinate.longitude
    return (
        f"{abs(lat):.4f}°{'N' if lat >= 0 else 'S'}, "
        f"{abs(lon):.4f}°{'E' if lon >= 0 else 'W'}"
    )


def _format_instant(label: str, instant: Optional[datetime], zenith_name: str) -> str:
    if instant is None:
        return f"{label}: none (sun does not cross {zenith_name} zenith)"
    return f"{label}: {instant.strftime(TIME_FORMAT)}"


def _format_duration(duration: timedelta) -> str:
    total_minutes = int(duration.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes:02d}m"


def format_result(request: "CalculationRequest", result: "CalculationResult") -> str:
    """Generate a human-readable summary of a sunrise/sunset calculation.

    Args:
        request: The calculation inputs
        result: The calculated sunrise/sunset

    Returns:
        Multi-line summary string
    """
    zenith_name = request.zenith.name.lower()
    lines = [
        f"Sun times for {request.date.isoformat()} "
        f"at {format_coordinate(request.coordinate)} ({zenith_name} zenith)",
        _format_instant("Sunrise", result.sunrise, zenith_name),
        _format_instant("Sunset", result.sunset, zenith_name),
    ]

    if result.day_length is not None:
        lines.append(f"Day length: {_format_duration(result.day_length)}")
    elif result.is_polar:
        lines.append("Polar day or polar night")

    return "\n".join(lines)


def format_table(rows: list[tuple[date, "CalculationResult"]], lengths: np.ndarray) -> str:
    """Format daylight table rows as aligned text columns."""

    def cell(instant: Optional[datetime]) -> str:
        return instant.strftime("%m-%d %H:%M:%S") if instant is not None else "-"

    lines = [f"{'Date':<10}  {'Sunrise':<14}  {'Sunset':<14}  {'Hours':>5}"]
    for (day, result), hours in zip(rows, lengths):
        hours_str = "-" if np.isnan(hours) else f"{hours:.2f}"
        lines.append(
            f"{day.isoformat():<10}  {cell(result.sunrise):<14}  "
            f"{cell(result.sunset):<14}  {hours_str:>5}"
        )

    valid = lengths[~np.isnan(lengths)]
    if valid.size:
        lines.append(
            f"Mean day length {valid.mean():.2f} h "
            f"(min {valid.min():.2f} h, max {valid.max():.2f} h)"
        )
    return "\n".join(lines)
