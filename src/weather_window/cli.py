# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for weather-window.

We use argparse (stdlib) rather than click because:
- No extra dependency to install
- Sufficient for 2 simple subcommands

Commands:
  weather-window analyze   — historical profile around a calendar date
  weather-window trend     — year-by-year series for one variable
"""

import argparse
from datetime import date
from pathlib import Path

from weather_window.analysis import analyze_date, terminal_summary
from weather_window.chart import render_trend_chart
from weather_window.config import load_config
from weather_window.geocode import LocationNotFoundError, geocode, location_id
from weather_window.history import fetch_historical
from weather_window.trend import describe_trend, trend_series
from weather_window.variables import canonical_variable

VARIABLE_UNITS = {
    "temp_max":      "°C",
    "temp_min":      "°C",
    "temp_avg":      "°C",
    "precipitation": " mm",
    "humidity":      "%",
    "wind":          " m/s",
    "uv":            "",
    "soil_moisture": " mm",
}


def _resolve_location(args, config: dict) -> dict:
    """Location from --location (geocoded) or from the [location] config section."""
    if args.location:
        try:
            return geocode(args.location)
        except LocationNotFoundError as e:
            print(f"[error] {e}")
            raise SystemExit(1)
    location = config["location"]
    return {
        "id": location_id(location["name"]),
        "name": location["name"],
        "latitude": location["latitude"],
        "longitude": location["longitude"],
    }


def _parse_date(raw: str | None) -> date:
    if raw is None:
        return date.today()
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        print(f"[error] Unrecognised --date format: '{raw}'. Use 'YYYY-MM-DD'.")
        raise SystemExit(1)


def _load_records(loc: dict, years: int, config: dict) -> list[dict]:
    print(f"Fetching {years} years of daily history for {loc['name']}...")
    records = fetch_historical(
        location=loc["id"],
        latitude=loc["latitude"],
        longitude=loc["longitude"],
        years=years,
        log_path=Path(config["log"]["path"]),
    )
    if not records:
        print("[error] No historical records returned.")
        raise SystemExit(1)
    return records


def cmd_analyze(args) -> None:
    """Fetch history, analyse the window around --date, print the report."""
    config = load_config()
    analysis_config = config["analysis"]

    target = _parse_date(args.date)
    tolerance = args.tolerance if args.tolerance is not None else analysis_config["tolerance_days"]
    if tolerance < 0:
        print(f"[error] --tolerance must be 0 or more, got {tolerance}.")
        raise SystemExit(1)
    years = args.years or analysis_config["years"]
    variable = canonical_variable(analysis_config["trend_variable"])

    try:
        loc = _resolve_location(args, config)
        records = _load_records(loc, years, config)
    except RuntimeError as e:
        print(str(e))
        raise SystemExit(1)

    result = analyze_date(records, loc["id"], target, tolerance, wrap_year=args.wrap_year)
    trend = describe_trend(trend_series(records, variable))

    print()
    print(terminal_summary(loc["name"], result, trend=trend, variable=variable))


def cmd_trend(args) -> None:
    """Fetch history and chart one variable's yearly means."""
    config = load_config()
    analysis_config = config["analysis"]
    years = args.years or analysis_config["years"]

    try:
        variable = canonical_variable(args.variable or analysis_config["trend_variable"])
    except ValueError as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    try:
        loc = _resolve_location(args, config)
        records = _load_records(loc, years, config)
    except RuntimeError as e:
        print(str(e))
        raise SystemExit(1)

    series = trend_series(records, variable)
    trend = describe_trend(series)
    unit = VARIABLE_UNITS[variable]

    print()
    print(render_trend_chart(series, f"📈 {loc['name']} — yearly mean {variable}", unit=unit))
    print()
    sign = "+" if trend["slope_per_decade"] >= 0 else ""
    print(
        f"Trend: {sign}{trend['slope_per_decade']}{unit} per decade "
        f"({trend['label']}, R² {trend['r_squared']})"
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="weather-window",
        description="Historical weather profile for any place and calendar date",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    location_help = 'Place name to analyse, e.g. "Tokyo". Defaults to [location] in config.toml'
    years_help = "Years of history to fetch. Defaults to [analysis].years"

    p_analyze = subparsers.add_parser("analyze", help="Historical statistics around a date")
    p_analyze.add_argument("--location", metavar="PLACE", default=None, help=location_help)
    p_analyze.add_argument(
        "--date",
        metavar="YYYY-MM-DD",
        default=None,
        help="Calendar date to profile. Default: today",
    )
    p_analyze.add_argument(
        "--tolerance",
        metavar="N",
        type=int,
        default=None,
        help="± days around the date. Defaults to [analysis].tolerance_days",
    )
    p_analyze.add_argument("--years", metavar="N", type=int, default=None, help=years_help)
    p_analyze.add_argument(
        "--wrap-year",
        action="store_true",
        help="Let the window cross New Year (e.g. Dec 30 ±5 includes Jan 1-4)",
    )

    p_trend = subparsers.add_parser("trend", help="Year-by-year means for one variable")
    p_trend.add_argument("--location", metavar="PLACE", default=None, help=location_help)
    p_trend.add_argument(
        "--variable",
        metavar="ID",
        default=None,
        help="temp_avg, temp_max, temp_min, precipitation, humidity, wind, uv or soil_moisture",
    )
    p_trend.add_argument("--years", metavar="N", type=int, default=None, help=years_help)

    args = parser.parse_args()

    commands = {
        "analyze": cmd_analyze,
        "trend": cmd_trend,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
