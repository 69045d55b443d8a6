"""OpenWeather One Call provider."""
from __future__ import annotations

from typing import Dict

from .base import WeatherProvider


class OpenWeatherProvider(WeatherProvider):
    """Integration with the OpenWeather One Call endpoint."""

    name = "openweather"
    base_url = "https://api.openweathermap.org/data/2.5/onecall"

    def build_params(self, latitude: str, longitude: str) -> Dict[str, str]:
        return {
            "lat": latitude,
            "lon": longitude,
            "units": "metric",
            "exclude": "minutely",
            "appid": self.api_key,
        }


__all__ = ["OpenWeatherProvider"]
