# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
analysis.py — Statistical profile of the weather around a calendar date.

Pipeline: resolve the day-of-year, select every year's records within the
±N day window, aggregate each variable, derive soil moisture, estimate data
quality and finally combine the averages into a comfort score.

All calculations use the Python standard library only (no numpy/scipy).
"""

from __future__ import annotations

import statistics
from datetime import date, datetime

from weather_window.comfort import DEFAULT_MONTH, comfort_label, comfort_score
from weather_window.indicators import soil_moisture_series
from weather_window.stats import EMPTY_DESCRIPTION, describe, exceedance
from weather_window.trend import trend_series
from weather_window.variables import series
from weather_window.window import DEFAULT_TOLERANCE, as_date, resolve_day_of_year, select_window

HEAT_THRESHOLD = 30.0    # °C, mean temperature above
COLD_THRESHOLD = -10.0   # °C, mean temperature below
RAIN_THRESHOLD = 5.0     # mm/day, above

# Slots per record in the completeness denominator. Six series are tracked;
# the seventh slot is kept so figures stay comparable with earlier reports.
EXPECTED_POINTS_PER_RECORD = 7

SUMMARY_VARIABLES = ("temperature", "precipitation", "humidity", "wind", "uv", "soil_moisture")

DETAILED_TREND_YEARS = 7


def _stats(values: list[float], probability: float = 0.0) -> dict:
    return {"probability": round(probability, 1), **describe(values)}


def _avg(values: list[float]) -> float:
    return statistics.fmean(values) if values else 0.0


def empty_summary() -> dict:
    """The zero-filled WeatherSummary returned when the window is empty."""
    summary: dict = {
        name: {"probability": 0.0, **EMPTY_DESCRIPTION} for name in SUMMARY_VARIABLES
    }
    summary["comfort_score"] = 0.0
    summary["years"] = 0
    summary["data_quality"] = {"completeness": 0.0, "reliability": 0.0}
    return summary


def data_quality(record_count: int, valid_points: int) -> dict:
    """Completeness and reliability of a window.

    completeness = valid_points / (record_count * 7) * 100, or 0.0 for an
    empty window. reliability is 95 above 80 % completeness, 85 above 60 %,
    otherwise 70.

    Returns dict with keys completeness (float, one decimal) and
    reliability (float).
    """
    expected = record_count * EXPECTED_POINTS_PER_RECORD
    completeness = valid_points / expected * 100 if expected > 0 else 0.0
    if completeness > 80:
        reliability = 95.0
    elif completeness > 60:
        reliability = 85.0
    else:
        reliability = 70.0
    return {"completeness": round(completeness, 1), "reliability": reliability}


def summarize(records: list[dict], month: int | None = DEFAULT_MONTH) -> dict:
    """Aggregate a windowed record set into a WeatherSummary.

    Input records are raw daily records (see variables.py). Invalid or
    missing values are dropped per variable; they never count as zero.

    Returns dict with keys:
        temperature, precipitation, humidity, wind, uv, soil_moisture
            (each: probability, average, min, max, median, std_dev),
        comfort_score (float 0-10), years (int, record count),
        data_quality (dict: completeness, reliability)

    An empty input returns empty_summary(), never raises.
    """
    if not records:
        return empty_summary()
    if month is None:
        month = DEFAULT_MONTH

    temps   = series(records, "temp_avg")
    precips = series(records, "precipitation")
    humids  = series(records, "humidity")
    winds   = series(records, "wind")
    uvs     = series(records, "uv")
    soils   = soil_moisture_series(records)

    heat_prob = exceedance(temps, lambda t: t > HEAT_THRESHOLD)
    cold_prob = exceedance(temps, lambda t: t < COLD_THRESHOLD)
    rain_prob = exceedance(precips, lambda p: p > RAIN_THRESHOLD)

    score = comfort_score(_avg(temps), _avg(humids), _avg(winds), _avg(uvs), month)

    valid_points = sum(len(s) for s in (temps, precips, humids, winds, uvs, soils))

    return {
        "temperature":   _stats(temps, max(heat_prob, cold_prob)),
        "precipitation": _stats(precips, rain_prob),
        "humidity":      _stats(humids),
        "wind":          _stats(winds),
        "uv":            _stats(uvs),
        "soil_moisture": _stats(soils),
        "comfort_score": round(score, 1),
        "years":         len(records),
        "data_quality":  data_quality(len(records), valid_points),
    }


def analyze_date(
    records: list[dict],
    location: str,
    target_date: date | datetime | str,
    tolerance: int = DEFAULT_TOLERANCE,
    wrap_year: bool = False,
) -> dict:
    """Run the full analysis for one location and calendar date.

    Args:
        records: All raw records (any number of locations).
        location: Location identifier, matched case-insensitively.
        target_date: date, datetime or 'YYYY-MM-DD' string.
        tolerance: ±days around the target day-of-year (>= 0).
        wrap_year: Let the window wrap across the year boundary.

    Returns dict with keys:
        location (str), date (datetime.date), day_of_year (int),
        tolerance (int), window (list of the selected raw records),
        summary (WeatherSummary dict)
    """
    target_date = as_date(target_date)
    doy = resolve_day_of_year(target_date)
    window = select_window(records, location, doy, tolerance, wrap_year=wrap_year)
    return {
        "location":    location,
        "date":        target_date,
        "day_of_year": doy,
        "tolerance":   tolerance,
        "window":      window,
        "summary":     summarize(window, target_date.month),
    }


def detailed_statistics(records: list[dict]) -> dict:
    """Extended threshold statistics for a window.

    Returns dict with keys:
        temp_avg, temp_std, hot_prob (>35 °C), cold_prob (<5 °C), temp_trend,
        rain_avg, rain_prob (>1 mm), heavy_prob (>10 mm), rain_trend,
        rh_avg, very_humid (>80 %), wind_avg, strong_wind (>10 m/s),
        wind_trend, uv_avg, uv_high (>=6), uv_extreme (>=11)

    The *_trend values are per-year means for the last 7 years present.
    Probabilities are percentages. Empty input gives zeros and empty lists.
    """
    temps  = series(records, "temp_avg")
    rain   = series(records, "precipitation")
    humids = series(records, "humidity")
    winds  = series(records, "wind")
    uvs    = series(records, "uv")

    def last_years(variable: str) -> list[float]:
        return [v for _, v in trend_series(records, variable)[-DETAILED_TREND_YEARS:]]

    return {
        "temp_avg":    _avg(temps),
        "temp_std":    statistics.pstdev(temps) if temps else 0.0,
        "hot_prob":    exceedance(temps, lambda t: t > 35),
        "cold_prob":   exceedance(temps, lambda t: t < 5),
        "temp_trend":  last_years("temp_avg"),
        "rain_avg":    _avg(rain),
        "rain_prob":   exceedance(rain, lambda p: p > 1),
        "heavy_prob":  exceedance(rain, lambda p: p > 10),
        "rain_trend":  last_years("precipitation"),
        "rh_avg":      _avg(humids),
        "very_humid":  exceedance(humids, lambda h: h > 80),
        "wind_avg":    _avg(winds),
        "strong_wind": exceedance(winds, lambda w: w > 10),
        "wind_trend":  last_years("wind"),
        "uv_avg":      _avg(uvs),
        "uv_high":     exceedance(uvs, lambda u: u >= 6),
        "uv_extreme":  exceedance(uvs, lambda u: u >= 11),
    }


def terminal_summary(
    location_name: str,
    result: dict,
    trend: dict | None = None,
    variable: str = "temp_avg",
) -> str:
    """Return a formatted multi-line terminal summary string.

    Example:
        📍 New York — 15 Jul (day 196, ±5 days)
        ──────────────────────────────────────────────────────────────
        🌡  Temperature:        avg 24.1°C  (18.0°C to 31.2°C, σ 2.3)
        ...
    """
    summary = result["summary"]
    when = result["date"].strftime("%-d %b")
    header = f"📍 {location_name} — {when} (day {result['day_of_year']}, ±{result['tolerance']} days)"

    if summary["years"] == 0:
        return f"{header}\nNo historical data available for this window."

    t = summary["temperature"]
    p = summary["precipitation"]
    q = summary["data_quality"]
    score = summary["comfort_score"]
    sep = "─" * 62

    lines = [
        header,
        sep,
        f"📊  Records analysed:   {summary['years']} days  "
        f"(completeness {q['completeness']}%, reliability {q['reliability']:.0f}%)",
        "",
        f"🌡  Temperature:        avg {t['average']}°C  "
        f"({t['min']}°C to {t['max']}°C, σ {t['std_dev']})",
        f"🔥  Extreme temp days:  {t['probability']}%  (>{HEAT_THRESHOLD:.0f}°C or <{COLD_THRESHOLD:.0f}°C)",
        f"🌧  Precipitation:      avg {p['average']} mm  (>{RAIN_THRESHOLD:.0f} mm on {p['probability']}% of days)",
        f"💧  Humidity:           avg {summary['humidity']['average']}%",
        f"💨  Wind:               avg {summary['wind']['average']} m/s",
        f"☀️  UV index:           avg {summary['uv']['average']}",
        f"🌱  Soil moisture:      avg {summary['soil_moisture']['average']} mm",
        "",
        f"😊  Comfort:            {score}/10 ({comfort_label(score)})",
    ]
    if trend is not None:
        sign = "+" if trend["slope_per_decade"] >= 0 else ""
        lines.append(
            f"📈  Trend ({variable}):  {sign}{trend['slope_per_decade']} per decade ({trend['label']})"
        )
    lines.append(sep)
    return "\n".join(lines)
