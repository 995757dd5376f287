# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
dashboard.py — Streamlit dashboard: historical weather around a calendar date.

Run with:
    streamlit run app/dashboard.py
    streamlit run app/dashboard.py -- --location "New York" --date 2025-07-15

Requires: pip install -e ".[ui]"
Data source: NASA POWER daily point data (free, no key).
"""

import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import argparse
from datetime import date

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from weather_window.analysis import analyze_date, detailed_statistics
from weather_window.comfort import comfort_label
from weather_window.geocode import LocationNotFoundError, geocode
from weather_window.history import fetch_historical
from weather_window.stats import linear_regression
from weather_window.trend import describe_trend, trend_series


# ─────────────────────────────────────────────────────────────
# Page config: must be the first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Window",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed",
)

DARK_CSS = """
<style>
  #MainMenu, footer, header { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; max-width: 960px; }
  html, body, [class*="css"] { background-color: #0a0a0a; color: #f5f5f7; }
  .stat-pill { background: #2c2c2e; border-radius: 12px; padding: 14px 18px; width: 100%; }
  .stat-label { font-size: 0.68rem; text-transform: uppercase; letter-spacing: 0.08em; color: #8e8e93; }
  .stat-value { font-size: 1.6rem; font-weight: 700; color: #f5f5f7; line-height: 1.2; }
  .stat-unit { font-size: 0.9rem; color: #8e8e93; }
  .section-label { font-size: 0.72rem; text-transform: uppercase; letter-spacing: 0.1em;
                   color: #636366; font-weight: 600; margin: 1.5rem 0 0.75rem; }
  .error-card { background: rgba(255,69,58,0.1); border: 1px solid rgba(255,69,58,0.3);
                border-radius: 12px; color: #ff453a; padding: 20px 24px; text-align: center; }
</style>
"""

st.markdown(DARK_CSS, unsafe_allow_html=True)

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(color="#8e8e93", size=12),
    margin=dict(l=8, r=8, t=32, b=8),
    legend=dict(bgcolor="rgba(0,0,0,0)", font=dict(color="#8e8e93")),
    xaxis=dict(showgrid=False, zeroline=False, tickfont=dict(color="#636366")),
    yaxis=dict(gridcolor="#2c2c2e", zeroline=False, tickfont=dict(color="#636366")),
)

TREND_VARIABLES = {
    "Average temperature (°C)": "temp_avg",
    "Max temperature (°C)":     "temp_max",
    "Min temperature (°C)":     "temp_min",
    "Precipitation (mm)":       "precipitation",
    "Humidity (%)":             "humidity",
    "Wind (m/s)":               "wind",
    "UV index":                 "uv",
    "Soil moisture (mm)":       "soil_moisture",
}


def stat_html(label: str, value: str, unit: str = "") -> str:
    """Render a stat pill as HTML."""
    return f"""
    <div class="stat-pill">
      <div class="stat-label">{label}</div>
      <div class="stat-value">{value}<span class="stat-unit"> {unit}</span></div>
    </div>
    """


def _parse_cli_args() -> tuple[str | None, date, int]:
    """Parse --location, --date and --tolerance after the '--' separator."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--location", type=str, default=None)
    parser.add_argument("--date", type=date.fromisoformat, default=date.today())
    parser.add_argument("--tolerance", type=int, default=5)

    try:
        sep = sys.argv.index("--")
        script_args = sys.argv[sep + 1:]
    except ValueError:
        script_args = []

    args, _ = parser.parse_known_args(script_args)
    return args.location, args.date, args.tolerance


CLI_LOCATION, CLI_DATE, CLI_TOLERANCE = _parse_cli_args()


@st.cache_data(ttl=86400)
def load_records(location: str, years: int) -> dict:
    """Geocode *location* and fetch its daily history.

    Returns {"location": dict, "records": list[dict]} or {"error": str}.
    """
    try:
        loc = geocode(location)
    except LocationNotFoundError as exc:
        return {"error": str(exc)}
    except RuntimeError as exc:
        return {"error": f"Geocoding error: {exc}"}

    try:
        records = fetch_historical(loc["id"], loc["latitude"], loc["longitude"], years=years)
    except RuntimeError as exc:
        return {"error": f"Historical data fetch failed: {exc}"}

    if not records:
        return {"error": "No historical records returned for this location."}
    return {"location": loc, "records": records}


def _trend_figure(series: list[tuple[int, float]], title: str) -> go.Figure:
    years = [float(y) for y, _ in series]
    values = [v for _, v in series]
    fit = linear_regression(years, values)
    labels = [str(y) for y, _ in series]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels, y=values, name="Yearly mean", mode="lines+markers",
        line=dict(color="#0a84ff", width=2), marker=dict(color="#0a84ff", size=4),
    ))
    if len(series) >= 2:
        fig.add_trace(go.Scatter(
            x=labels, y=[fit["slope"] * x + fit["intercept"] for x in years],
            name=f"Linear fit (R² {fit['r2']:.2f})", mode="lines",
            line=dict(color="#ff9f0a", width=1.5, dash="dot"),
        ))
    fig.update_layout(**{
        **PLOTLY_LAYOUT,
        "title": dict(text=title, font=dict(color="#8e8e93", size=13)),
        "height": 300,
        "hovermode": "x unified",
    })
    return fig


def main() -> None:
    """Render the dashboard."""
    col_l, col_c, col_r = st.columns([1, 2, 1])
    with col_c:
        location_input = st.text_input(
            label="location",
            value=CLI_LOCATION or "",
            placeholder="Enter a location (e.g. New York)",
            label_visibility="collapsed",
        )
        date_col, tol_col, years_col = st.columns(3)
        with date_col:
            target_date = st.date_input("Date", value=CLI_DATE)
        with tol_col:
            tolerance = st.number_input("± days", min_value=0, max_value=30, value=CLI_TOLERANCE)
        with years_col:
            years = st.number_input("Years", min_value=1, max_value=40, value=25)
        wrap_year = st.checkbox("Let the window cross New Year", value=False)

    query = location_input.strip() or CLI_LOCATION
    if not query:
        st.markdown(
            '<div class="section-label" style="text-align:center;">'
            "Enter a location to see its weather history</div>",
            unsafe_allow_html=True,
        )
        return

    with st.spinner(f"Loading {int(years)}-year history for {query}…"):
        data = load_records(query, int(years))

    if "error" in data:
        st.markdown(f'<div class="error-card">⚠️ {data["error"]}</div>', unsafe_allow_html=True)
        return

    loc = data["location"]
    records = data["records"]
    result = analyze_date(records, loc["id"], target_date, int(tolerance), wrap_year=wrap_year)
    summary = result["summary"]

    st.markdown(
        f'<h2 style="font-size:1.6rem;font-weight:700;">📅 {loc["name"]}</h2>'
        f'<div class="stat-label">{target_date:%d %b} · day {result["day_of_year"]}'
        f' · ±{result["tolerance"]} days · {summary["years"]} records</div>',
        unsafe_allow_html=True,
    )

    if summary["years"] == 0:
        st.markdown(
            '<div class="error-card">⚠️ No historical data in this window. Try another date.</div>',
            unsafe_allow_html=True,
        )
        return

    score = summary["comfort_score"]
    pills = [
        ("Avg Temp", summary["temperature"]["average"], "°C"),
        ("Rain > 5 mm", summary["precipitation"]["probability"], "%"),
        ("Humidity", summary["humidity"]["average"], "%"),
        ("Comfort", score, f"/10 · {comfort_label(score)}"),
    ]
    for column, (label, value, unit) in zip(st.columns(4), pills):
        with column:
            st.markdown(stat_html(label, f"{value}", unit), unsafe_allow_html=True)

    st.markdown('<div class="section-label">Window statistics</div>', unsafe_allow_html=True)
    rows = []
    for name in ("temperature", "precipitation", "humidity", "wind", "uv", "soil_moisture"):
        s = summary[name]
        rows.append({
            "Variable": name.replace("_", " ").title(),
            "Average": s["average"], "Median": s["median"],
            "Min": s["min"], "Max": s["max"], "Std dev": s["std_dev"],
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    quality = summary["data_quality"]
    st.caption(
        f"Data completeness {quality['completeness']}% · reliability {quality['reliability']:.0f}%"
    )

    with st.expander("Threshold probabilities"):
        detail = detailed_statistics(result["window"])
        st.dataframe(
            pd.DataFrame([
                {"Event": "Hot day (> 35 °C)", "Probability %": round(detail["hot_prob"], 1)},
                {"Event": "Cool day (< 5 °C)", "Probability %": round(detail["cold_prob"], 1)},
                {"Event": "Rain (> 1 mm)", "Probability %": round(detail["rain_prob"], 1)},
                {"Event": "Heavy rain (> 10 mm)", "Probability %": round(detail["heavy_prob"], 1)},
                {"Event": "Very humid (> 80 %)", "Probability %": round(detail["very_humid"], 1)},
                {"Event": "Strong wind (> 10 m/s)", "Probability %": round(detail["strong_wind"], 1)},
                {"Event": "High UV (≥ 6)", "Probability %": round(detail["uv_high"], 1)},
            ]),
            use_container_width=True,
            hide_index=True,
        )

    st.markdown('<div class="section-label">Long-term trend</div>', unsafe_allow_html=True)
    variable_label = st.selectbox("Variable", list(TREND_VARIABLES), label_visibility="collapsed")
    series = trend_series(records, TREND_VARIABLES[variable_label])
    trend = describe_trend(series)
    st.plotly_chart(
        _trend_figure(series, variable_label),
        use_container_width=True,
        config={"displayModeBar": False},
    )
    sign = "+" if trend["slope_per_decade"] >= 0 else ""
    st.caption(f"{sign}{trend['slope_per_decade']} per decade ({trend['label']})")


main()
