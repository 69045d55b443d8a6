"""Immutable runtime configuration for the proxy."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from django.conf import settings as django_settings

from weatherproxy.core.errors import ConfigurationError


class ProviderKind(str, Enum):
    OPEN_METEO = "open-meteo"
    OPENWEATHER = "openweather"
    WEATHERAPI = "weatherapi"


@dataclass(frozen=True)
class ProviderConfig:
    """Settings read once at startup and handed to every component."""

    provider: str = ProviderKind.OPEN_METEO.value
    api_key: str = ""
    cache_ttl_ms: int = 600_000
    timeout_ms: int = 5_000
    port: int = 3000

    @classmethod
    def from_settings(cls, settings=django_settings) -> "ProviderConfig":
        return cls(
            provider=settings.WEATHER_PROVIDER,
            api_key=settings.WEATHER_API_KEY,
            cache_ttl_ms=settings.WEATHER_CACHE_TTL_MS,
            timeout_ms=settings.WEATHER_TIMEOUT_MS,
            port=settings.WEATHER_PROXY_PORT,
        )

    @property
    def kind(self) -> ProviderKind:
        try:
            return ProviderKind(self.provider)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown provider: {self.provider}") from exc

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_ms / 1000

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


__all__ = ["ProviderConfig", "ProviderKind"]
