# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for indicators.py — evapotranspiration, the soil-moisture proxy
and dust-storm risk."""

import pytest

from weather_window.indicators import (
    DUST_THRESHOLD,
    SOIL_MOISTURE_MAX,
    SOIL_MOISTURE_MIN,
    dust_risk,
    evapotranspiration,
    record_soil_moisture,
    soil_moisture,
    soil_moisture_series,
)


def make_record(temp_max=30.0, temp_min=20.0, humidity=50.0, wind=2.0, precipitation=1.0):
    return {
        "temp_max": temp_max,
        "temp_min": temp_min,
        "humidity": humidity,
        "wind": wind,
        "precipitation": precipitation,
    }


# ---------------------------------------------------------------------------
# evapotranspiration
# ---------------------------------------------------------------------------

class TestEvapotranspiration:

    def test_known_value(self):
        """0.0023 * 42.8 * sqrt(25) * 0.5 * 1.2 = 0.29532"""
        assert evapotranspiration(25.0, 50.0, 2.0) == pytest.approx(0.29532)

    def test_saturated_air_has_no_evaporation(self):
        assert evapotranspiration(25.0, 100.0, 5.0) == pytest.approx(0.0)

    def test_wind_increases_evaporation(self):
        assert evapotranspiration(25.0, 50.0, 10.0) > evapotranspiration(25.0, 50.0, 0.0)

    def test_uses_absolute_temperature_under_root(self):
        """Negative temperatures must not raise a math domain error."""
        assert evapotranspiration(-5.0, 50.0, 2.0) == pytest.approx(
            0.0023 * 12.8 * 5 ** 0.5 * 0.5 * 1.2
        )


# ---------------------------------------------------------------------------
# soil_moisture
# ---------------------------------------------------------------------------

class TestSoilMoisture:

    def test_balance_inside_bounds(self):
        assert soil_moisture(25.0, 50.0, 2.0, 5.0) == pytest.approx(5.0 - 0.29532)

    def test_clamped_to_upper_bound(self):
        assert soil_moisture(25.0, 50.0, 2.0, 100.0) == SOIL_MOISTURE_MAX

    def test_clamped_to_lower_bound(self):
        """Very hot, bone-dry and stormy: ET ≈ 12 mm, P = 0 → clamps to -10."""
        assert soil_moisture(50.0, 0.0, 100.0, 0.0) == SOIL_MOISTURE_MIN

    def test_upper_bound_is_exactly_thirty(self):
        assert soil_moisture(20.0, 60.0, 3.0, 500.0) == 30.0

    def test_lower_bound_is_exactly_minus_ten(self):
        assert soil_moisture(50.0, 0.0, 150.0, 0.0) == -10.0


# ---------------------------------------------------------------------------
# record_soil_moisture / soil_moisture_series
# ---------------------------------------------------------------------------

class TestRecordSoilMoisture:

    def test_complete_record(self):
        record = make_record(temp_max=30.0, temp_min=20.0, humidity=50.0, wind=2.0, precipitation=5.0)
        assert record_soil_moisture(record) == pytest.approx(5.0 - 0.29532)

    def test_missing_humidity_is_skipped(self):
        assert record_soil_moisture(make_record(humidity=None)) is None

    def test_missing_temperature_is_skipped(self):
        assert record_soil_moisture(make_record(temp_min="n/a")) is None

    def test_zero_mean_temperature_is_skipped(self):
        """Same temperature validity as the aggregator: an exact 0.0 mean is missing data."""
        assert record_soil_moisture(make_record(temp_max=4.0, temp_min=-4.0)) is None

    def test_zero_precipitation_is_valid(self):
        assert record_soil_moisture(make_record(precipitation=0.0)) is not None


def test_soil_moisture_series_drops_incomplete_records():
    records = [make_record(), make_record(wind=None), make_record(precipitation="x"), make_record()]
    assert len(soil_moisture_series(records)) == 2


def test_soil_moisture_series_empty():
    assert soil_moisture_series([]) == []


# ---------------------------------------------------------------------------
# dust_risk
# ---------------------------------------------------------------------------

def dust(time, value, year=2020):
    return {"time": time, "value": value, "year": year}


class TestDustRisk:

    def test_no_samples(self):
        assert dust_risk([]) == {"level": "Low", "color": "green", "description": "No data available"}

    def test_only_invalid_samples(self):
        result = dust_risk([dust("00:30", None), dust("01:30", "n/a")])
        assert result["description"] == "No data available"

    @pytest.mark.parametrize("peak, level, color", [
        (0.5e-8, "Low", "green"),
        (2.5e-8, "Moderate", "yellow"),
        (3.5e-8, "High", "red"),
    ])
    def test_level_follows_maximum(self, peak, level, color):
        result = dust_risk([dust("00:30", 0.1e-8), dust("12:30", peak)])
        assert result["level"] == level
        assert result["color"] == color
        assert result["description"] == f"{level} risk of dust storm"

    def test_max_avg_min(self):
        result = dust_risk([dust("00:30", 1e-9), dust("01:30", 3e-9), dust("02:30", 5e-9)])
        assert result["max_value"] == pytest.approx(5e-9)
        assert result["avg_value"] == pytest.approx(3e-9)
        assert result["min_value"] == pytest.approx(1e-9)
        assert result["threshold"] == DUST_THRESHOLD

    def test_expected_start_is_peak_hourly_mean(self):
        """A single spike at 03:30 loses to a consistently dusty 15:30."""
        samples = [
            dust("03:30", 4e-8, 2019), dust("03:30", 0.0, 2020), dust("03:30", 0.0, 2021),
            dust("15:30", 2e-8, 2019), dust("15:30", 2e-8, 2020), dust("15:30", 2e-8, 2021),
        ]
        result = dust_risk(samples)
        assert result["expected_start"] == "15:30"
        assert result["level"] == "High"

    def test_hourly_stats_sorted_by_time(self):
        samples = [dust("12:30", 2e-9), dust("00:30", 1e-9), dust("12:30", 4e-9, 2021)]
        stats = dust_risk(samples)["hourly_stats"]
        assert [h["time"] for h in stats] == ["00:30", "12:30"]
        assert stats[1]["avg"] == pytest.approx(3e-9)
        assert stats[1]["max"] == pytest.approx(4e-9)

    def test_years(self):
        samples = [dust("00:30", 1e-9, 2021), dust("00:30", 1e-9, 2019), dust("01:30", 1e-9, 2021)]
        result = dust_risk(samples)
        assert result["years"] == [2019, 2021]
        assert result["years_count"] == 2

    def test_tie_keeps_earliest_slot(self):
        result = dust_risk([dust("06:30", 1e-9), dust("01:30", 1e-9)])
        assert result["expected_start"] == "01:30"
