"""Error handling utilities for sunrise/sunset calculation."""

import sys
from typing import Optional


class SolarError(Exception):
    """Base exception for solar-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class InvalidCoordinateError(SolarError, ValueError):
    """Raised when a latitude or longitude is outside its valid range."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude
        message = f"Invalid coordinate: latitude={latitude}, longitude={longitude}"
        suggestions = [
            "Latitude must be a finite number in [-90, 90]",
            "Longitude must be a finite number in [-180, 180]",
            "West longitudes and south latitudes are negative",
        ]
        super().__init__(message, suggestions)


class UnknownZenithError(SolarError, ValueError):
    """Raised when a zenith name is not recognized."""

    def __init__(self, name: str, available: list[str]):
        message = f"Unknown zenith: '{name}'"
        suggestions = [
            f"Available zeniths: {', '.join(available)}",
            "Zenith names are case-insensitive",
        ]
        super().__init__(message, suggestions)


class DateParseError(SolarError, ValueError):
    """Raised when a civil date cannot be parsed."""

    def __init__(self, value: str):
        message = f"Invalid date format: '{value}'"
        suggestions = [
            "Use ISO-8601 calendar format (e.g., '2024-06-21')",
            "Omit --date to use the current UTC date",
        ]
        super().__init__(message, suggestions)


class EphemerisUnavailableError(SolarError):
    """Raised when the JPL ephemeris for the reference almanac cannot be loaded."""

    def __init__(self, name: str, reason: str):
        message = f"Could not load ephemeris '{name}': {reason}"
        suggestions = [
            "Check network access; skyfield downloads the file on first use",
            "Place the .bsp file in the working directory and pass it with --ephemeris",
            "Run without --compare to skip the reference cross-check",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, SolarError):
        traceback.print_exception(type(error), error, error.__traceback__)

    return 1
