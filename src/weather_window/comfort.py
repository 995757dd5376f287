# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
comfort.py — Composite 0-10 outdoor comfort score.

Each factor is compared against its ideal band and earns a tiered penalty.
Penalties are weighted by season, summed, scaled by 0.9 and subtracted
from 10. Extreme conditions bypass the model entirely and score 2.
"""

EXTREME_SCORE = 2.0
PENALTY_SCALE = 0.9
DEFAULT_MONTH = 6

# month -> (temperature, humidity, wind, uv) penalty weights
NEUTRAL_WEIGHTS = (1.0, 1.0, 1.0, 1.0)
WINTER_WEIGHTS = (1.0, 1.3, 1.5, 1.0)
SUMMER_WEIGHTS = (1.3, 1.0, 1.0, 1.5)

SEASON_WEIGHTS = {
    1: WINTER_WEIGHTS,  2: WINTER_WEIGHTS,  3: NEUTRAL_WEIGHTS,
    4: NEUTRAL_WEIGHTS, 5: NEUTRAL_WEIGHTS, 6: SUMMER_WEIGHTS,
    7: SUMMER_WEIGHTS,  8: SUMMER_WEIGHTS,  9: NEUTRAL_WEIGHTS,
    10: NEUTRAL_WEIGHTS, 11: NEUTRAL_WEIGHTS, 12: WINTER_WEIGHTS,
}

COMFORT_LABELS = [
    (8.0, "excellent"),
    (6.0, "good"),
    (4.0, "fair"),
    (2.0, "uncomfortable"),
]


def is_extreme(temp: float, wind: float, uv: float) -> bool:
    """True when conditions are dangerous regardless of anything else."""
    return temp > 40 or uv > 10 or wind > 20 or temp < -20


def temperature_penalty(temp: float) -> int:
    """Ideal 18-24 °C."""
    if temp < 10 or temp > 30:
        return 3
    if temp < 15 or temp > 25:
        return 2
    if temp < 18 or temp > 24:
        return 1
    return 0


def humidity_penalty(humidity: float) -> int:
    """Ideal 40-60 %."""
    if humidity < 30 or humidity > 80:
        return 2
    if humidity < 40 or humidity > 60:
        return 1
    return 0


def wind_penalty(wind: float) -> int:
    """Ideal 2-8 m/s; only winds above 10 m/s are penalised on the high side."""
    if wind < 1 or wind > 15:
        return 2
    if wind < 2 or wind > 10:
        return 1
    return 0


def uv_penalty(uv: float) -> int:
    """Ideal 1-8."""
    if uv < 1 or uv > 8:
        return 1
    return 0


def comfort_score(
    temp: float,
    humidity: float,
    wind: float,
    uv: float,
    month: int = DEFAULT_MONTH,
) -> float:
    """Score how pleasant average conditions are for being outdoors.

    Args:
        temp: Average temperature, °C.
        humidity: Average relative humidity, %.
        wind: Average wind speed, m/s.
        uv: Average UV index.
        month: Calendar month 1-12 selecting the seasonal weights.
            Months outside 1-12 use neutral weights.

    Returns:
        Score in [0, 10]; exactly 2.0 for extreme conditions.
    """
    if is_extreme(temp, wind, uv):
        return EXTREME_SCORE

    w_temp, w_humidity, w_wind, w_uv = SEASON_WEIGHTS.get(month, NEUTRAL_WEIGHTS)
    total_penalty = (
        temperature_penalty(temp) * w_temp
        + humidity_penalty(humidity) * w_humidity
        + wind_penalty(wind) * w_wind
        + uv_penalty(uv) * w_uv
    )
    return max(0.0, min(10.0, 10 - total_penalty * PENALTY_SCALE))


def comfort_label(score: float) -> str:
    """Map a comfort score to a one-word rating."""
    for floor, label in COMFORT_LABELS:
        if score >= floor:
            return label
    return "poor"
