# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing.
"""

import tomllib
from pathlib import Path

from weather_window.variables import canonical_variable


DEFAULT_CONFIG_PATH = Path("config.toml")

REQUIRED_KEYS = {
    "location": ("name", "latitude", "longitude"),
    "analysis": ("tolerance_days", "years"),
    "log": ("path",),
}


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values. [analysis].trend_variable
        defaults to "temp_avg" when absent.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or invalid.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and fill in your location."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    config["analysis"].setdefault("trend_variable", "temp_avg")
    return config


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [location]
        name      = <str>     # place name, e.g. "New York"
        latitude  = <float>   # decimal degrees, e.g. 40.7128
        longitude = <float>   # decimal degrees, e.g. -74.0060

        [analysis]
        tolerance_days = <int>   # ± days around the target date, >= 0
        years          = <int>   # years of history to fetch, >= 1
        trend_variable = <str>   # optional, default "temp_avg"

        [log]
        path = <str>     # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent, or a value
            is out of range or trend_variable is unknown.
    """
    for section, keys in REQUIRED_KEYS.items():
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")
        for key in keys:
            if key not in config[section]:
                raise ValueError(f"Missing required config key: [{section}].{key}")

    analysis = config["analysis"]
    if analysis["tolerance_days"] < 0:
        raise ValueError("[analysis].tolerance_days must be >= 0")
    if analysis["years"] < 1:
        raise ValueError("[analysis].years must be >= 1")
    if "trend_variable" in analysis:
        canonical_variable(analysis["trend_variable"])
