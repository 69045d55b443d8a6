from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherproxy.settings")
os.environ.update(
    {
        "PORT": "3000",
        "WEATHER_PROVIDER": "open-meteo",
        "WEATHER_API_KEY": "",
        "CACHE_TTL_MS": "600000",
        "WEATHER_TIMEOUT_MS": "5000",
    }
)

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture(autouse=True)
def _fresh_weather_service():
    from weatherproxy.api.views import get_weather_service

    get_weather_service.cache_clear()
    yield
    get_weather_service.cache_clear()
