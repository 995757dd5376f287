# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
chart.py — ASCII bar charts for trend series.

Uses only the Python standard library (os).
All rendering functions return strings ready to print.
"""

import os

FALLBACK_TERMINAL_WIDTH: int = 80
BAR_LABEL_RESERVE: int = 30  # characters reserved for label + value outside the bar


def _terminal_bar_width() -> int:
    try:
        terminal_width = os.get_terminal_size().columns
    except OSError:
        terminal_width = FALLBACK_TERMINAL_WIDTH
    return max(10, terminal_width - BAR_LABEL_RESERVE)


def _bar(value: float, max_value: float, bar_width: int) -> str:
    """Render a single filled/empty bar scaled to bar_width.

    Args:
        value: The data value to represent.
        max_value: The maximum value (maps to full bar width).
        bar_width: Total character width of the bar.

    Returns:
        String of '█' and '░' characters of length bar_width.
    """
    if max_value == 0:
        filled = 0
    else:
        filled = round((value / max_value) * bar_width)
    filled = max(0, min(filled, bar_width))
    return "█" * filled + "░" * (bar_width - filled)


def render_bar_chart(
    labels: list[str],
    values: list[float],
    title: str,
    unit: str = "",
    bar_width: int | None = None,
) -> str:
    """Render a labelled horizontal bar chart.

    Negative values are shifted so the smallest value maps to an empty bar;
    the printed numbers are always the real values.

    Args:
        labels: List of row label strings.
        values: List of numeric values corresponding to each label.
        title: Chart title printed above the bars.
        unit: Optional unit suffix appended to each value (e.g. '°C', ' mm').
        bar_width: Width of the bar in characters. Auto-detected from terminal if None.

    Returns:
        Multi-line string containing the chart.
    """
    if bar_width is None:
        bar_width = _terminal_bar_width()
    if not values:
        return f"{title}\n  (no data)"

    lowest = min(values)
    offset = -lowest if lowest < 0 else 0
    shifted = [v + offset for v in values]
    max_val = max(shifted) or 1  # avoid division by zero

    label_w = max(len(lbl) for lbl in labels)
    lines = [title]
    for label, scaled, real in zip(labels, shifted, values):
        bar = _bar(scaled, max_val, bar_width)
        val_str = f"{real:.1f}{unit}"
        lines.append(f"  {label:<{label_w}} │{bar}│ {val_str:>8}")

    return "\n".join(lines)


def render_trend_chart(
    series: list[tuple[int, float]],
    title: str,
    unit: str = "",
    bar_width: int | None = None,
) -> str:
    """Render a (year, value) trend series as one bar per year."""
    labels = [str(year) for year, _ in series]
    values = [v for _, v in series]
    return render_bar_chart(labels, values, title, unit=unit, bar_width=bar_width)
