from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import Response

from weatherproxy.core.errors import UpstreamError


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 5.0


class WeatherProvider:
    """Base class for upstream integrations: one GET, bounded timeout, no retries."""

    name: str = ""
    base_url: str = ""

    def __init__(
        self,
        *,
        api_key: str = "",
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url or self.base_url
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def build_params(self, latitude: str, longitude: str) -> Dict[str, str]:
        raise NotImplementedError

    def fetch(self, latitude: str, longitude: str) -> Any:
        """Return the decoded upstream body for the coordinates, unmodified."""
        params = self.build_params(latitude, longitude)
        response = self._request(self.base_url, params=params)
        return self._json(response)

    # helpers ------------------------------------------------------------
    def _request(self, url: str, **kwargs) -> Response:
        timeout = self.request_config.timeout
        try:
            response = self.session.get(url, timeout=timeout, **kwargs)
        except requests.Timeout as exc:
            self._log.error("Request to %s timed out", self.name, exc_info=exc)
            raise UpstreamError(f"timeout of {int(timeout * 1000)}ms exceeded", provider=self.name) from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", self.name, exc_info=exc)
            raise UpstreamError(f"Request failed: {exc}", provider=self.name) from exc
        return self._handle_response(response)

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error("Provider %s returned %s: %s", self.name, response.status_code, response.text[:500])
            raise UpstreamError(
                f"Request failed with status code {response.status_code}",
                provider=self.name,
                status_code=response.status_code,
            )
        return response

    def _json(self, response: Response) -> Any:
        try:
            return json.loads(response.text, parse_constant=_reject_constant, parse_float=_finite_float)
        except ValueError as exc:
            self._log.error("Failed to decode JSON from %s", self.name, exc_info=exc)
            raise UpstreamError(f"Invalid JSON received from {self.name}", provider=self.name) from exc


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def _finite_float(value: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"number {value} is out of range")
    return number


__all__ = ["WeatherProvider", "RequestConfig"]
