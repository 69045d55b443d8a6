from __future__ import annotations

import pytest
import requests

from weatherproxy.config import ProviderConfig
from weatherproxy.core.errors import ConfigurationError, UpstreamError
from weatherproxy.core.providers import (
    OpenMeteoProvider,
    OpenWeatherProvider,
    RequestConfig,
    WeatherApiProvider,
    build_provider,
)


def test_openmeteo_requests_current_weather(requests_mock):
    provider = OpenMeteoProvider()
    body = {"current_weather": {"temperature": 18.3}}
    requests_mock.get("https://api.open-meteo.com/v1/forecast", json=body)

    payload = provider.fetch("52.52", "13.41")

    assert payload == body
    assert requests_mock.last_request.qs == {
        "latitude": ["52.52"],
        "longitude": ["13.41"],
        "current_weather": ["true"],
    }
    assert requests_mock.last_request.timeout == 5.0


def test_openweather_sends_units_exclude_and_key(requests_mock):
    provider = OpenWeatherProvider(api_key="abc123")
    requests_mock.get("https://api.openweathermap.org/data/2.5/onecall", json={"current": {"temp": 7}})

    payload = provider.fetch("40.71", "-74.0")

    assert payload == {"current": {"temp": 7}}
    assert requests_mock.last_request.qs == {
        "lat": ["40.71"],
        "lon": ["-74.0"],
        "units": ["metric"],
        "exclude": ["minutely"],
        "appid": ["abc123"],
    }


def test_weatherapi_combines_coordinates(requests_mock):
    provider = WeatherApiProvider(api_key="abc123")
    requests_mock.get("http://api.weatherapi.com/v1/current.json", json={"current": {"temp_c": 11}})

    provider.fetch("48.85", "2.35")

    assert requests_mock.last_request.qs == {"key": ["abc123"], "q": ["48.85,2.35"]}


def test_base_url_override(requests_mock):
    provider = OpenMeteoProvider(base_url="https://openmeteo.test")
    requests_mock.get("https://openmeteo.test", json={"ok": True})

    assert provider.fetch("1", "2") == {"ok": True}


def test_non_2xx_raises_upstream_error(requests_mock):
    provider = OpenWeatherProvider(api_key="bad")
    requests_mock.get("https://api.openweathermap.org/data/2.5/onecall", status_code=401, json={"cod": 401})

    with pytest.raises(UpstreamError) as excinfo:
        provider.fetch("1", "2")

    assert str(excinfo.value) == "Request failed with status code 401"
    assert excinfo.value.status_code == 401
    assert excinfo.value.provider == "openweather"


def test_timeout_is_not_retried(requests_mock):
    provider = OpenMeteoProvider(request_config=RequestConfig(timeout=0.25))
    requests_mock.get("https://api.open-meteo.com/v1/forecast", exc=requests.exceptions.ConnectTimeout)

    with pytest.raises(UpstreamError, match="timeout of 250ms exceeded"):
        provider.fetch("1", "2")

    assert requests_mock.call_count == 1
    assert requests_mock.last_request.timeout == 0.25


def test_connection_error_raises_upstream_error(requests_mock):
    provider = WeatherApiProvider(api_key="k")
    requests_mock.get("http://api.weatherapi.com/v1/current.json", exc=requests.exceptions.ConnectionError("refused"))

    with pytest.raises(UpstreamError, match="Request failed: refused"):
        provider.fetch("1", "2")


def test_invalid_json_raises_upstream_error(requests_mock):
    provider = OpenMeteoProvider()
    requests_mock.get("https://api.open-meteo.com/v1/forecast", text="<html>bad gateway</html>")

    with pytest.raises(UpstreamError, match="Invalid JSON received from open-meteo"):
        provider.fetch("1", "2")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("open-meteo", OpenMeteoProvider),
        ("openweather", OpenWeatherProvider),
        ("weatherapi", WeatherApiProvider),
    ],
)
def test_build_provider_selects_class(name, expected):
    provider = build_provider(ProviderConfig(provider=name, api_key="k", timeout_ms=1500))

    assert isinstance(provider, expected)
    assert provider.api_key == "k"
    assert provider.request_config.timeout == 1.5


def test_build_provider_rejects_unknown_name(requests_mock):
    with pytest.raises(ConfigurationError, match="Unknown provider: darksky"):
        build_provider(ProviderConfig(provider="darksky"))

    assert requests_mock.call_count == 0


@pytest.mark.parametrize("body", ['{"t": NaN}', '{"t": -Infinity}', '{"t": 1e999}'])
def test_non_finite_numbers_are_rejected(requests_mock, body):
    provider = OpenMeteoProvider()
    requests_mock.get("https://api.open-meteo.com/v1/forecast", text=body)

    with pytest.raises(UpstreamError, match="Invalid JSON received from open-meteo"):
        provider.fetch("1", "2")
