# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
window.py — Day-of-year resolution and ±N day record selection.

A "window" pools every year's observations that fall within `tolerance`
days of the target day-of-year, so ~25 years of history become one sample.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime

from weather_window.variables import to_int

DEFAULT_TOLERANCE = 5
DAYS_IN_LEAP_YEAR = 366


def as_date(value: date | datetime | str) -> date:
    """Coerce a date, datetime (time part dropped) or 'YYYY-MM-DD' string to a date.

    Raises:
        ValueError: If a string is not a valid ISO date.
    """
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    if isinstance(value, datetime):
        return value.date()
    return value


def days_in_year(year: int | None) -> int:
    """365 or 366; an unknown year counts as a leap year."""
    if year is None:
        return DAYS_IN_LEAP_YEAR
    return 366 if calendar.isleap(year) else 365


def resolve_day_of_year(value: date | datetime | str) -> int:
    """Return the 1-based day-of-year of a calendar date.

    Counts whole days elapsed since January 1 of the same year, plus one,
    so Jan 1 → 1, Mar 1 → 61 in a leap year and 60 otherwise, Dec 31 → 366
    in a leap year. No leap-day special-casing is needed.

    Args:
        value: A date, datetime (time part ignored) or 'YYYY-MM-DD' string.

    Raises:
        ValueError: If a string is not a valid ISO date. Invalid dates are a
            caller error; this function does not try to repair them.
    """
    value = as_date(value)
    return (value - date(value.year, 1, 1)).days + 1


def normalize_location(name: str) -> str:
    """Normalise a location identifier for comparison.

    'new_york', 'New York' and ' NEW  york ' all normalise to 'new york'.
    """
    return " ".join(str(name).replace("_", " ").lower().split())


def _doy_matches(
    doy: int,
    target_doy: int,
    tolerance: int,
    wrap_year: bool,
    year: int | None = None,
) -> bool:
    if not wrap_year:
        # Plain integer range: days 362-366 are NOT neighbours of day 1.
        return target_doy - tolerance <= doy <= target_doy + tolerance
    if doy >= target_doy:
        # late in its own year, target early in the next one
        across = days_in_year(year) - doy + target_doy
        distance = doy - target_doy
    else:
        # early in its own year, target late in the previous one
        across = days_in_year(None if year is None else year - 1) - target_doy + doy
        distance = target_doy - doy
    return min(distance, across) <= tolerance


def select_window(
    records: list[dict],
    location: str,
    target_doy: int,
    tolerance: int = DEFAULT_TOLERANCE,
    wrap_year: bool = False,
) -> list[dict]:
    """Select a location's records within ±tolerance days of target_doy.

    Location matching ignores case and treats underscores as spaces. The
    day-of-year range is inclusive and, by default, does not wrap across
    the year boundary: a target of day 3 with tolerance 5 sees days 1-8
    only, never the previous December. Pass wrap_year=True to measure the
    distance circularly instead; the cycle length is 365 or 366 from the
    record's "year" (366 when it has none).

    Args:
        records: Full raw record list; never mutated.
        location: Location identifier to match.
        target_doy: Target day-of-year (1-366).
        tolerance: Half-width of the window in days (>= 0).
        wrap_year: Opt in to year-boundary wraparound.

    Returns:
        A new list of the matching records, in input order.
    """
    wanted = normalize_location(location)
    selected = []
    for r in records:
        if normalize_location(r.get("location", "")) != wanted:
            continue
        doy = to_int(r.get("doy"))
        if doy is None:
            continue
        if _doy_matches(doy, target_doy, tolerance, wrap_year, to_int(r.get("year"))):
            selected.append(r)
    return selected


def day_window(
    records: list[dict],
    target_date: date | datetime | str,
    tolerance: int = DEFAULT_TOLERANCE,
) -> list[dict]:
    """Select records within ±tolerance days of a date, ignoring location.

    For record lists that already belong to a single place (e.g. the output
    of the ingestion adapter). Same non-wrapping range as select_window.
    """
    target_doy = resolve_day_of_year(target_date)
    selected = []
    for r in records:
        doy = to_int(r.get("doy"))
        if doy is not None and _doy_matches(doy, target_doy, tolerance, False):
            selected.append(r)
    return selected
