# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
trend.py — Year-by-year series for one variable, and their linear trend.

Works on the full record set for a location, never on a day-of-year window.
"""

from __future__ import annotations

import statistics
from collections import defaultdict

from weather_window.indicators import record_soil_moisture
from weather_window.stats import linear_regression
from weather_window.variables import canonical_variable, to_int, valid_value

STABLE_SLOPE = 0.005


def _sample(record: dict, variable: str) -> float | None:
    if variable == "soil_moisture":
        return record_soil_moisture(record)
    return valid_value(record, variable)


def trend_series(records: list[dict], variable: str) -> list[tuple[int, float]]:
    """Mean of *variable* per year, ascending by year.

    Years in which the variable has no valid sample are left out of the
    series entirely (not zero-filled), so the result can be shorter than
    the number of distinct years and need not be contiguous.

    Args:
        records: All raw records for one location.
        variable: Variable id (e.g. 'temp_avg', 'precipitation') or a NASA
            POWER alias such as 'T2M_MAX'.

    Returns:
        List of (year, mean_value) tuples.

    Raises:
        ValueError: If the variable id is unknown.
    """
    name = canonical_variable(variable)

    by_year: dict[int, list[float]] = defaultdict(list)
    for r in records:
        year = to_int(r.get("year"))
        if year is None:
            continue
        sample = _sample(r, name)
        if sample is not None:
            by_year[year].append(sample)

    return [(year, statistics.fmean(by_year[year])) for year in sorted(by_year)]


def describe_trend(series: list[tuple[int, float]]) -> dict:
    """Fit a straight line through a trend series.

    Returns dict with keys:
        slope (float, units per year),
        slope_per_decade (float),
        r_squared (float, 0-1),
        label (str: "rising" | "falling" | "stable")
    """
    xs = [float(year) for year, _ in series]
    ys = [v for _, v in series]
    fit = linear_regression(xs, ys)
    slope = fit["slope"]

    if slope > STABLE_SLOPE:
        label = "rising"
    elif slope < -STABLE_SLOPE:
        label = "falling"
    else:
        label = "stable"

    return {
        "slope":            round(slope, 4),
        "slope_per_decade": round(slope * 10, 2),
        "r_squared":        round(fit["r2"], 4),
        "label":            label,
    }
