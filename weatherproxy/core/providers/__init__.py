"""Upstream weather providers and the factory that selects one."""
from __future__ import annotations

from typing import Dict, Optional, Type

import requests

from weatherproxy.config import ProviderConfig, ProviderKind

from .base import RequestConfig, WeatherProvider
from .openmeteo import OpenMeteoProvider
from .openweather import OpenWeatherProvider
from .weatherapi import WeatherApiProvider


PROVIDERS: Dict[ProviderKind, Type[WeatherProvider]] = {
    ProviderKind.OPEN_METEO: OpenMeteoProvider,
    ProviderKind.OPENWEATHER: OpenWeatherProvider,
    ProviderKind.WEATHERAPI: WeatherApiProvider,
}


def build_provider(config: ProviderConfig, session: Optional[requests.Session] = None) -> WeatherProvider:
    """Instantiate the configured provider; raises ``ConfigurationError`` for unknown names."""
    provider_cls = PROVIDERS[config.kind]
    return provider_cls(
        api_key=config.api_key,
        session=session,
        request_config=RequestConfig(timeout=config.timeout_seconds),
    )


__all__ = [
    "PROVIDERS",
    "OpenMeteoProvider",
    "OpenWeatherProvider",
    "RequestConfig",
    "WeatherApiProvider",
    "WeatherProvider",
    "build_provider",
]
