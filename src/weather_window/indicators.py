# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
indicators.py — Indicators derived from the raw fields.

The source data has no soil-moisture measurement, so we approximate one
from a daily water balance: precipitation minus an empirical
evapotranspiration estimate (Hargreaves-style temperature term, damped by
humidity, amplified by wind).

Also: a dust-storm risk level from hourly MERRA-2 dust-mass samples that
share a day-of-year across years.
"""

from __future__ import annotations

import math
import statistics
from collections import defaultdict

from weather_window.variables import mean_temperature, to_float, to_int, valid_value

SOIL_MOISTURE_MIN = -10.0
SOIL_MOISTURE_MAX = 30.0


def evapotranspiration(temperature: float, humidity: float, wind: float) -> float:
    """Empirical evapotranspiration estimate in mm/day.

    ET = 0.0023 * (T + 17.8) * sqrt(|T|) * (1 - RH/100) * (1 + 0.1 * W)

    Args:
        temperature: Mean daily temperature T in °C.
        humidity: Relative humidity RH in %.
        wind: Wind speed W in m/s.
    """
    return (
        0.0023
        * (temperature + 17.8)
        * math.sqrt(abs(temperature))
        * (1 - humidity / 100)
        * (1 + 0.1 * wind)
    )


def soil_moisture(
    temperature: float,
    humidity: float,
    wind: float,
    precipitation: float,
) -> float:
    """Soil-moisture proxy in mm: precipitation minus ET, clamped to [-10, 30]."""
    balance = precipitation - evapotranspiration(temperature, humidity, wind)
    if math.isnan(balance):
        return balance
    return max(SOIL_MOISTURE_MIN, min(SOIL_MOISTURE_MAX, balance))


def record_soil_moisture(record: dict) -> float | None:
    """Soil-moisture proxy for one raw record, or None if any input is invalid."""
    t = mean_temperature(record)
    rh = valid_value(record, "humidity")
    w = valid_value(record, "wind")
    p = valid_value(record, "precipitation")
    if t is None or rh is None or w is None or p is None:
        return None
    sm = soil_moisture(t, rh, w, p)
    return None if math.isnan(sm) else sm


def soil_moisture_series(records: list[dict]) -> list[float]:
    """Soil-moisture proxies for every record with complete inputs."""
    values = []
    for r in records:
        sm = record_soil_moisture(r)
        if sm is not None:
            values.append(sm)
    return values


# ─────────────────────────────────────────────────────────────
# Dust-storm risk (MERRA-2 DUSMASS25 surface dust mass, kg/m³)
# ─────────────────────────────────────────────────────────────

DUST_THRESHOLD = 1.0e-08

DUST_LEVELS = [
    (3, "High", "red"),
    (2, "Moderate", "yellow"),
]


def dust_risk(samples: list[dict]) -> dict:
    """Dust-storm risk for one day-of-year pooled across years.

    Args:
        samples: Hourly dust-mass readings, each a dict with keys
            time ('HH:MM'), value (kg/m³) and year. Readings whose value
            is missing or non-numeric are skipped.

    Returns dict with keys:
        level ("Low" | "Moderate" | "High"), color, description,
        max_value, avg_value, min_value (float), expected_start (str, the
        'HH:MM' slot with the highest mean across years), threshold,
        years_count (int), years (sorted list), hourly_stats (list of
        dicts with time, avg, max, min, sorted by time)

    Level is High when the maximum exceeds 3 × DUST_THRESHOLD and Moderate
    above 2 ×. No usable samples gives level Low, color green and
    description "No data available" only.
    """
    valid = []
    for s in samples or []:
        v = to_float(s.get("value"))
        if v is not None:
            valid.append((s, v))
    if not valid:
        return {"level": "Low", "color": "green", "description": "No data available"}

    values = [v for _, v in valid]
    max_value = max(values)

    by_time: dict[str, list[float]] = defaultdict(list)
    for s, v in valid:
        by_time[str(s.get("time"))].append(v)
    hourly_stats = [
        {"time": t, "avg": statistics.fmean(vs), "max": max(vs), "min": min(vs)}
        for t, vs in sorted(by_time.items())
    ]
    # first slot wins a tie
    peak = max(hourly_stats, key=lambda h: h["avg"])

    level, color = "Low", "green"
    for factor, name, level_color in DUST_LEVELS:
        if max_value > factor * DUST_THRESHOLD:
            level, color = name, level_color
            break

    years = sorted({y for y in (to_int(s.get("year")) for s, _ in valid) if y is not None})
    return {
        "level":          level,
        "color":          color,
        "description":    f"{level} risk of dust storm",
        "max_value":      max_value,
        "avg_value":      statistics.fmean(values),
        "min_value":      min(values),
        "expected_start": peak["time"],
        "threshold":      DUST_THRESHOLD,
        "years_count":    len(years),
        "years":          years,
        "hourly_stats":   hourly_stats,
    }
