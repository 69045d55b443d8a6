"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weatherproxy.api.views import get_weather_service
from weatherproxy.core.errors import WeatherProxyError


class Command(BaseCommand):
    help = "Fetch current weather for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", type=str, required=True, help="Latitude")
        parser.add_argument("--lon", type=str, required=True, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        latitude = options["lat"]
        longitude = options["lon"]
        if not latitude or not longitude:
            raise CommandError("--lat and --lon must not be empty")
        try:
            result = get_weather_service().get_weather(latitude, longitude)
        except WeatherProxyError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(result.as_dict()))
