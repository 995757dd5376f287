# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
history.py — Fetch historical daily weather from the NASA POWER API.

API docs: https://power.larc.nasa.gov/docs/services/api/temporal/daily/
Returns raw observation records in the shape described in variables.py.
"""

import requests
from datetime import date, datetime, timedelta
from pathlib import Path
from weather_window.utils import DEFAULT_LOG_PATH, with_retry
from weather_window.window import resolve_day_of_year

POWER_API_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"

# NASA POWER parameter -> record field
PARAMETERS = {
    "T2M_MAX":             "temp_max",
    "T2M_MIN":             "temp_min",
    "RH2M":                "humidity",
    "WS2M":                "wind",
    "PRECTOTCORR":         "precipitation",
    "ALLSKY_SFC_UV_INDEX": "uv",
}

DEFAULT_FILL_VALUE = -999.0


def date_range_for_years(years: int) -> tuple[date, date]:
    """Return (start_date, end_date) for the past N years ending yesterday."""
    end = date.today() - timedelta(days=1)
    try:
        start = end.replace(year=end.year - years)
    except ValueError:
        # Feb 29 has no counterpart in a non-leap start year
        start = end.replace(year=end.year - years, day=28)
    return start, end


def fetch_historical(
    location: str,
    latitude: float,
    longitude: float,
    years: int = 25,
    log_path: Path = DEFAULT_LOG_PATH,
) -> list[dict]:
    """Fetch daily historical observations for one point.

    Args:
        location: Location id stamped on every record, e.g. 'new_york'.
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        years: How many years back from yesterday to fetch.
        log_path: Where a final fetch failure is logged.

    Returns:
        List of raw record dicts, one per day, sorted by date.

    Raises:
        RuntimeError: If all retries fail.
    """
    start, end = date_range_for_years(years)
    params = {
        "parameters": ",".join(PARAMETERS),
        "community": "AG",
        "latitude": latitude,
        "longitude": longitude,
        "start": start.strftime("%Y%m%d"),
        "end": end.strftime("%Y%m%d"),
        "format": "JSON",
    }

    def _call() -> dict:
        r = requests.get(POWER_API_URL, params=params, timeout=120)
        r.raise_for_status()
        return r.json()

    data = with_retry(_call, label="NASA POWER daily API", log_path=log_path)
    return _parse_daily(data, location)


def _parse_daily(data: dict, location: str) -> list[dict]:
    """Parse a NASA POWER daily point response into raw record dicts.

    Values equal to the response's fill value become None. UV keeps the raw
    sentinel so the analysis core's own "not measured" handling applies.
    """
    fill_value = data.get("header", {}).get("fill_value", DEFAULT_FILL_VALUE)
    parameters = data["properties"]["parameter"]

    day_keys: set[str] = set()
    for values in parameters.values():
        day_keys.update(values)

    records = []
    for key in sorted(day_keys):
        day = datetime.strptime(key, "%Y%m%d").date()
        record = {
            "location": location,
            "date":     day,
            "year":     day.year,
            "doy":      resolve_day_of_year(day),
        }
        for parameter, field in PARAMETERS.items():
            raw = parameters.get(parameter, {}).get(key)
            if raw is not None and raw == fill_value and field != "uv":
                raw = None
            record[field] = float(raw) if raw is not None else None
        records.append(record)
    return records
