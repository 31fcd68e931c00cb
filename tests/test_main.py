import pytest
from unittest.mock import patch
from datetime import date, datetime, timezone

from solar.errors import EphemerisUnavailableError
from solar.main import main, parse_args, parse_date, run
from solar.models import CalculationResult
from solar.reference import ReferenceComparison


def test_parse_date():
    assert parse_date("2024-06-21") == date(2024, 6, 21)


def test_parse_date_invalid():
    with pytest.raises(ValueError, match="Invalid date format"):
        parse_date("21/06/2024")


def test_parse_args_defaults():
    args = parse_args(["--lat", "51.5", "--lon", "-0.12"])

    assert args.latitude == 51.5
    assert args.longitude == -0.12
    assert args.zenith == "civil"
    assert args.days == 1
    assert args.compare is False
    assert args.verbose is False
    assert date.fromisoformat(args.date)


def test_parse_args_rejects_unknown_zenith():
    with pytest.raises(SystemExit):
        parse_args(["--lat", "0", "--lon", "0", "--zenith", "golden"])


def test_parse_args_requires_coordinate():
    with pytest.raises(SystemExit):
        parse_args(["--date", "2024-06-21"])


def test_run_single_day(capsys):
    exit_code = run("2024-06-21", 51.5074, -0.1278, "official")
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Sunrise: 2024-06-21 03:" in captured.out
    assert "Sunset: 2024-06-21 20:" in captured.out


def test_run_polar_is_not_an_error(capsys):
    exit_code = run("2024-12-21", 89.0, 0.0, "civil")
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Polar day or polar night" in captured.out
    assert captured.err == ""


def test_run_invalid_date(capsys):
    exit_code = run("2024-13-40", 0.0, 0.0)
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Error while parsing date" in captured.err


def test_run_invalid_coordinate(capsys):
    exit_code = run("2024-06-21", 91.0, 0.0)
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Error while validating coordinate" in captured.err
    assert "Invalid coordinate" in captured.err


def test_run_nan_latitude(capsys):
    exit_code = run("2024-06-21", float("nan"), 0.0)

    assert exit_code == 1
    assert "Invalid coordinate" in capsys.readouterr().err


def test_run_table(capsys):
    exit_code = run("2024-12-01", 78.0, 15.0, "official", days=5)
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "2024-12-05" in captured.out
    assert "No sunrise or sunset on 5 of 5 dates" in captured.out


def test_run_zero_days(capsys):
    exit_code = run("2024-12-01", 0.0, 0.0, days=0)

    assert exit_code == 1
    assert "at least 1" in capsys.readouterr().err


def test_run_verbose(capsys):
    exit_code = run("2024-06-21", 51.5074, -0.1278, "official", verbose=True)
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "=== VERBOSE: Solve State ===" in captured.out
    assert "Day of year: 173" in captured.out
    assert "cos(H):" in captured.out


def test_run_verbose_polar_shows_no_ut(capsys):
    run("2024-06-21", 85.0, 0.0, "official", verbose=True)
    assert "UT: none" in capsys.readouterr().out


def test_run_compare(capsys):
    sunrise = datetime(2024, 6, 21, 3, 43, 30, tzinfo=timezone.utc)
    sunset = datetime(2024, 6, 21, 20, 21, 10, tzinfo=timezone.utc)
    comparison = ReferenceComparison(
        approximate=CalculationResult(sunrise=sunrise, sunset=sunset),
        reference=CalculationResult(sunrise=sunrise, sunset=None),
        sunrise_delta_s=12.0,
        sunset_delta_s=None,
    )

    with patch("solar.reference.load_ephemeris") as mock_load, patch(
        "solar.reference.compare_with_reference", return_value=comparison
    ):
        exit_code = run("2024-06-21", 51.5074, -0.1278, "official", compare=True)
        mock_load.assert_called_once_with("de421.bsp")

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Reference (skyfield almanac):" in captured.out
    assert "Sunrise: 2024-06-21 03:43:30 UTC (difference +12 s)" in captured.out
    assert "Sunset: none" in captured.out


def test_run_compare_ephemeris_unavailable(capsys):
    with patch(
        "solar.reference.load_ephemeris",
        side_effect=EphemerisUnavailableError("missing.bsp", "not found"),
    ):
        exit_code = run(
            "2024-06-21", 0.0, 0.0, compare=True, ephemeris_name="missing.bsp"
        )

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Could not load ephemeris 'missing.bsp'" in captured.err


def test_main_exit_code():
    argv = ["solar", "--date", "2024-03-20", "--lat", "40.7", "--lon", "-74.0"]
    with patch("sys.argv", argv):
        with pytest.raises(SystemExit) as exc_info:
            main()
    assert exc_info.value.code == 0


def test_main_invalid_coordinate_exit_code():
    argv = ["solar", "--lat", "0", "--lon", "200"]
    with patch("sys.argv", argv):
        with pytest.raises(SystemExit) as exc_info:
            main()
    assert exc_info.value.code == 1
