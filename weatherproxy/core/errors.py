"""Error taxonomy shared by the proxy layers."""
from __future__ import annotations

from typing import Optional

from django.core.exceptions import ImproperlyConfigured


class WeatherProxyError(RuntimeError):
    """Base error for the weather proxy."""


class ValidationError(WeatherProxyError):
    """Raised when the request is missing coordinates."""


class ConfigurationError(WeatherProxyError, ImproperlyConfigured):
    """Raised when the configured provider cannot be resolved."""


class UpstreamError(WeatherProxyError):
    """Raised when a provider request fails or returns an unusable body."""

    def __init__(
        self,
        message: str,
        *,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


__all__ = ["WeatherProxyError", "ValidationError", "ConfigurationError", "UpstreamError"]
