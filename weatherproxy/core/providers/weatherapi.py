"""WeatherAPI.com current conditions provider."""
from __future__ import annotations

from typing import Dict

from .base import WeatherProvider


class WeatherApiProvider(WeatherProvider):
    name = "weatherapi"
    base_url = "http://api.weatherapi.com/v1/current.json"

    def build_params(self, latitude: str, longitude: str) -> Dict[str, str]:
        # WeatherAPI takes the coordinates as a single "lat,lon" query.
        return {
            "key": self.api_key,
            "q": f"{latitude},{longitude}",
        }


__all__ = ["WeatherApiProvider"]
