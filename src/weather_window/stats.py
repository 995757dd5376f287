# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
stats.py — Descriptive statistics, threshold probabilities and OLS.

Standard library only (statistics, no numpy/scipy). Every function is
stateless and returns zeros for empty input rather than raising.
"""

from __future__ import annotations

import statistics
from collections.abc import Callable, Sequence

EMPTY_DESCRIPTION = {
    "average": 0.0,
    "min":     0.0,
    "max":     0.0,
    "median":  0.0,
    "std_dev": 0.0,
}


def describe(values: Sequence[float]) -> dict:
    """Summarise a numeric series.

    Returns dict with keys average, min, max, median, std_dev (population
    standard deviation), each rounded to one decimal. An empty series gives
    0.0 for every key.
    """
    if not values:
        return dict(EMPTY_DESCRIPTION)
    return {
        "average": round(statistics.fmean(values), 1),
        "min":     round(min(values), 1),
        "max":     round(max(values), 1),
        "median":  round(statistics.median(values), 1),
        "std_dev": round(statistics.pstdev(values), 1),
    }


def exceedance(values: Sequence[float], predicate: Callable[[float], bool]) -> float:
    """Percentage (0-100) of values for which predicate is true; 0.0 if empty."""
    if not values:
        return 0.0
    hits = sum(1 for v in values if predicate(v))
    return hits / len(values) * 100


def linear_regression(xs: Sequence[float], ys: Sequence[float]) -> dict:
    """Ordinary least squares fit of ys against xs.

    OLS formula: slope = (n*sum(xy) - sum(x)*sum(y)) / (n*sum(x^2) - sum(x)^2)

    Returns dict with keys slope, intercept, r2. Inputs with fewer than two
    points, of unequal length, or with no spread in xs return all zeros.
    r2 is 0.0 when ys has no variance.
    """
    zero = {"slope": 0.0, "intercept": 0.0, "r2": 0.0}
    if len(xs) != len(ys) or len(xs) < 2:
        return zero

    xs = [float(x) for x in xs]
    ys = [float(y) for y in ys]
    n = len(xs)

    sum_x  = sum(xs)
    sum_y  = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)

    denom = n * sum_x2 - sum_x ** 2
    if denom == 0:
        return zero

    slope     = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n

    y_mean = sum_y / n
    ss_tot = sum((y - y_mean) ** 2 for y in ys)
    ss_res = sum((y - (slope * x + intercept)) ** 2 for x, y in zip(xs, ys))
    r2     = 1.0 - (ss_res / ss_tot) if ss_tot > 0 else 0.0

    return {"slope": slope, "intercept": intercept, "r2": r2}
