"""Weather service that fronts the configured provider with a TTL cache."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from weatherproxy.config import ProviderConfig
from weatherproxy.core.cache import WeatherCache, make_cache_key
from weatherproxy.core.providers import WeatherProvider, build_provider


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherResult:
    data: Any
    cached: bool

    def as_dict(self) -> Dict[str, Any]:
        return {"data": self.data, "cached": self.cached}


class WeatherService:
    """Serve cached upstream payloads, fetching on a miss or a stale entry.

    Concurrent misses for the same key may each hit the provider; the last
    store wins.
    """

    def __init__(self, provider: WeatherProvider, cache: WeatherCache) -> None:
        self.provider = provider
        self.cache = cache

    @classmethod
    def from_config(
        cls,
        config: ProviderConfig,
        *,
        session: Optional[requests.Session] = None,
        cache: Optional[WeatherCache] = None,
    ) -> "WeatherService":
        provider = build_provider(config, session=session)
        return cls(provider=provider, cache=cache or WeatherCache(ttl_seconds=config.cache_ttl_seconds))

    def get_weather(self, latitude: str, longitude: str) -> WeatherResult:
        cache_key = make_cache_key(latitude, longitude)
        hit = self.cache.lookup(cache_key)
        if hit is not None:
            payload, age = hit
            logger.debug("Cache hit for %s (age %.1fs)", cache_key, age)
            return WeatherResult(data=payload, cached=True)

        logger.debug("Cache miss for %s, fetching from %s", cache_key, self.provider.name)
        payload = self.provider.fetch(latitude, longitude)
        self.cache.store(cache_key, payload)
        return WeatherResult(data=payload, cached=False)


__all__ = ["WeatherResult", "WeatherService"]
