import argparse
import sys
from datetime import date, datetime, timezone

from .calculator import calculate_request, solve_event
from .errors import DateParseError, SolarError, handle_error
from .models import CalculationRequest, Coordinate, SolarEvent, Zenith
from .report import format_result, format_table
from .table import daylight_table, day_lengths_hours, polar_dates
from . import __version__


def parse_date(value: str) -> date:
    """Parse an ISO-8601 calendar date.

    Raises:
        DateParseError: If value is not of the form YYYY-MM-DD
    """
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise DateParseError(value)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Calculate sunrise and sunset times with the Sunrise Equation."
    )
    parser.add_argument(
        "--date",
        type=str,
        default=datetime.now(timezone.utc).date().isoformat(),
        help="Civil date as YYYY-MM-DD (default: current UTC date)",
    )
    parser.add_argument(
        "--latitude",
        "--lat",
        type=float,
        required=True,
        help="Latitude in degrees, positive north",
    )
    parser.add_argument(
        "--longitude",
        "--lon",
        type=float,
        required=True,
        help="Longitude in degrees, positive east",
    )
    parser.add_argument(
        "--zenith",
        type=str,
        choices=[z.name.lower() for z in Zenith],
        default="civil",
        help="Zenith defining sunrise/sunset (default: civil)",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=1,
        help="Number of consecutive dates to tabulate (default: 1)",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Cross-check against the skyfield almanac (downloads a JPL ephemeris)",
    )
    parser.add_argument(
        "--ephemeris",
        type=str,
        default=None,
        help="Ephemeris file for --compare (default: de421.bsp)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print the intermediate solve state",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def print_verbose_info(request: CalculationRequest) -> None:
    """Print intermediate Sunrise Equation quantities for both events."""
    print("=== VERBOSE: Solve State ===")
    for event in SolarEvent:
        trace = solve_event(event, request.date, request.coordinate, request.zenith)
        print(f"{event.value.capitalize()}:")
        print(f"  Day of year: {trace.day_of_year}")
        print(f"  Approximate time t: {trace.approximate_time:.4f}")
        print(f"  Mean anomaly M: {trace.mean_anomaly_deg:.4f}°")
        print(f"  True longitude L: {trace.true_longitude_deg:.4f}°")
        print(f"  Right ascension: {trace.right_ascension_hours:.4f} h")
        print(f"  cos(H): {trace.cos_hour_angle:.6f}")
        if trace.universal_time_hours is not None:
            print(f"  UT: {trace.universal_time_hours:.4f} h")
        else:
            print("  UT: none")
    print("=== END VERBOSE ===")
    print()


def print_comparison(request: CalculationRequest, ephemeris_name: str | None) -> None:
    """Print the difference to the skyfield almanac reference."""
    from .reference import DEFAULT_EPHEMERIS, compare_with_reference, load_ephemeris

    ephemeris = load_ephemeris(ephemeris_name or DEFAULT_EPHEMERIS)
    comparison = compare_with_reference(
        request.date, request.coordinate, request.zenith, ephemeris
    )

    print("Reference (skyfield almanac):")
    for label, instant, delta in (
        ("Sunrise", comparison.reference.sunrise, comparison.sunrise_delta_s),
        ("Sunset", comparison.reference.sunset, comparison.sunset_delta_s),
    ):
        when = instant.strftime("%Y-%m-%d %H:%M:%S UTC") if instant else "none"
        diff = f" (difference {delta:+.0f} s)" if delta is not None else ""
        print(f"  {label}: {when}{diff}")


def run(
    day_str: str,
    latitude: float,
    longitude: float,
    zenith_name: str = "civil",
    days: int = 1,
    compare: bool = False,
    ephemeris_name: str | None = None,
    verbose: bool = False,
) -> int:
    """Calculate and print sun times.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        try:
            day = parse_date(day_str)
        except DateParseError as e:
            return handle_error(e, "parsing date")

        zenith = Zenith.from_name(zenith_name)

        try:
            coordinate = Coordinate(latitude=latitude, longitude=longitude)
        except SolarError as e:
            return handle_error(e, "validating coordinate")

        request = CalculationRequest(day, coordinate, zenith)

        if verbose:
            print_verbose_info(request)

        if days != 1:
            rows = daylight_table(day, days, latitude, longitude, zenith)
            print(format_table(rows, day_lengths_hours(rows)))
            polar = polar_dates(rows)
            if polar:
                print(f"No sunrise or sunset on {len(polar)} of {days} dates")
        else:
            result = calculate_request(request)
            print(format_result(request, result))

        if compare:
            print()
            print_comparison(request, ephemeris_name)

        return 0

    except Exception as e:
        return handle_error(e, "calculating sun times")


def main():
    """CLI entry point."""
    args = parse_args()

    exit_code = run(
        day_str=args.date,
        latitude=args.latitude,
        longitude=args.longitude,
        zenith_name=args.zenith,
        days=args.days,
        compare=args.compare,
        ephemeris_name=args.ephemeris,
        verbose=args.verbose,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
