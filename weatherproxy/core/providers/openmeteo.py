"""Open-Meteo current weather provider."""
from __future__ import annotations

from typing import Dict

from .base import WeatherProvider


class OpenMeteoProvider(WeatherProvider):
    """Keyless integration with the Open-Meteo forecast endpoint."""

    name = "open-meteo"
    base_url = "https://api.open-meteo.com/v1/forecast"

    def build_params(self, latitude: str, longitude: str) -> Dict[str, str]:
        return {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
        }


__all__ = ["OpenMeteoProvider"]
