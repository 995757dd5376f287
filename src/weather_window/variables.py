# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
variables.py — Raw observation record contract and per-variable validity.

Every raw daily record is a dict with keys:
    location (str), year (int), doy (int 1-366),
    temp_max, temp_min (°C), humidity (%), wind (m/s),
    precipitation (mm/day), uv (index, -999 = not measured)

Numeric fields may arrive as floats, numeric strings, None, junk strings or
sentinels. Nothing here ever turns a missing value into 0.0; each variable
has exactly one validity predicate and every extraction goes through it.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any

UV_SENTINEL = -999.0

NUMERIC_FIELDS = (
    "temp_max",
    "temp_min",
    "humidity",
    "wind",
    "precipitation",
    "uv",
)

# Aliases accepted wherever a variable id is taken from a caller.
# Left side: NASA POWER parameter names used by the ingestion adapter.
VARIABLE_ALIASES = {
    "T2M_MAX":             "temp_max",
    "T2M_MIN":             "temp_min",
    "T2M_AVG":             "temp_avg",
    "T2M":                 "temp_avg",
    "RH2M":                "humidity",
    "WS2M":                "wind",
    "PRECTOTCORR":         "precipitation",
    "ALLSKY_SFC_UV_INDEX": "uv",
}


def to_float(value: Any) -> float | None:
    """Coerce a raw field value to float.

    Returns None for None, booleans, empty/non-numeric strings and NaN.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def to_int(value: Any) -> int | None:
    """Coerce a raw identifier (year, doy) to int, or None if not integral."""
    number = to_float(value)
    if number is None or math.isinf(number) or number != int(number):
        return None
    return int(number)


# ─────────────────────────────────────────────────────────────
# Validity predicates, one per variable
# ─────────────────────────────────────────────────────────────

def _is_valid_temperature(value: float) -> bool:
    # An exact 0.0 in the source data marks a missing temperature.
    return value != 0 and math.isfinite(value)


def _is_valid_uv(value: float) -> bool:
    return value != UV_SENTINEL and math.isfinite(value)


def _is_finite(value: float) -> bool:
    return math.isfinite(value)


VALIDITY: dict[str, Callable[[float], bool]] = {
    "temp_max":      _is_valid_temperature,
    "temp_min":      _is_valid_temperature,
    "temp_avg":      _is_valid_temperature,
    "humidity":      _is_finite,
    "wind":          _is_finite,
    "precipitation": _is_finite,
    "uv":            _is_valid_uv,
}


def mean_temperature(record: dict) -> float | None:
    """Average daily temperature: mean of temp_max and temp_min.

    This is the only place the "average temperature" is derived. Both
    inputs must be numeric; the result must pass the temperature predicate.
    """
    t_max = to_float(record.get("temp_max"))
    t_min = to_float(record.get("temp_min"))
    if t_max is None or t_min is None:
        return None
    t_avg = (t_max + t_min) / 2
    return t_avg if _is_valid_temperature(t_avg) else None


def valid_value(record: dict, variable: str) -> float | None:
    """Return the valid value of *variable* in *record*, or None."""
    if variable == "temp_avg":
        return mean_temperature(record)
    number = to_float(record.get(variable))
    if number is None or not VALIDITY[variable](number):
        return None
    return number


def series(records: Iterable[dict], variable: str) -> list[float]:
    """Extract the valid values of *variable* from *records*, in order."""
    values = []
    for r in records:
        v = valid_value(r, variable)
        if v is not None:
            values.append(v)
    return values


def canonical_variable(variable: str) -> str:
    """Resolve an alias to its canonical variable id.

    Raises:
        ValueError: If the id is neither canonical nor a known alias.
    """
    name = VARIABLE_ALIASES.get(variable, variable)
    if name not in VALIDITY and name != "soil_moisture":
        known = ", ".join(sorted([*VALIDITY, "soil_moisture"]))
        raise ValueError(f"Unknown variable '{variable}'. Expected one of: {known}")
    return name
