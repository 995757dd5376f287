# Project: weather-window
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
geocode.py — Resolve place names to coordinates and record location ids.

Uses the Open-Meteo Geocoding API (free, no API key).
API docs: https://open-meteo.com/en/docs/geocoding-api
"""

import requests
from weather_window.utils import with_retry

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


class LocationNotFoundError(ValueError):
    """Raised when the geocoding service has no match for a place name."""


def location_id(name: str) -> str:
    """Record-style location id for a place name: 'New York' → 'new_york'."""
    return "_".join(name.lower().split())


def _place(result: dict, fallback: str) -> dict:
    city = result.get("name", fallback)
    parts = [city]
    if result.get("admin1"):
        parts.append(result["admin1"])
    if result.get("country"):
        parts.append(result["country"])
    return {
        "id":        location_id(city),
        "name":      ", ".join(parts),
        "latitude":  result["latitude"],
        "longitude": result["longitude"],
    }


def search_places(query: str, count: int = 5) -> list[dict]:
    """Return up to *count* candidate places for a free-text query.

    Each candidate is a dict with keys id (str, e.g. 'new_york'),
    name (str, 'City, Region, Country'), latitude and longitude (float).
    An unknown query returns an empty list.

    Raises:
        RuntimeError: If all API retry attempts fail.
    """
    params = {
        "name": query,
        "count": count,
        "language": "en",
        "format": "json",
    }

    def _call():
        r = requests.get(GEOCODING_URL, params=params, timeout=10)
        r.raise_for_status()
        return r.json()

    data = with_retry(_call, label=f"Geocoding API for '{query}'")
    return [_place(result, query) for result in data.get("results") or []]


def geocode(place: str) -> dict:
    """Resolve a place name to its best match.

    Returns:
        Dict with keys id, name, latitude, longitude (see search_places).

    Raises:
        LocationNotFoundError: If nothing matches the place name.
        RuntimeError: If all API retry attempts fail.
    """
    candidates = search_places(place, count=1)
    if not candidates:
        raise LocationNotFoundError(f'Location "{place}" not found. Try a more specific name.')
    return candidates[0]
