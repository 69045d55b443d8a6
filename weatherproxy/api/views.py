"""REST API views for the weather proxy."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Tuple

from rest_framework import status
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherproxy.config import ProviderConfig
from weatherproxy.core.errors import ValidationError
from weatherproxy.core.services.weather import WeatherService


logger = logging.getLogger(__name__)

MISSING_COORDINATES = "Provide lat and lon query params"


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    # Failed construction is not memoised, so a bad provider fails every request.
    return WeatherService.from_config(ProviderConfig.from_settings())


def _coordinates(request) -> Tuple[str, str]:
    latitude = request.query_params.get("lat")
    longitude = request.query_params.get("lon")
    if not latitude or not longitude:
        raise ValidationError(MISSING_COORDINATES)
    return latitude, longitude


class JSONOnlyNegotiation(BaseContentNegotiation):
    """Always answer with the first renderer, whatever the Accept header says."""

    def select_parser(self, request, parsers):
        return parsers[0]

    def select_renderer(self, request, renderers, format_suffix=None):
        return renderers[0], renderers[0].media_type


class WeatherView(APIView):
    """Proxy current weather for the requested coordinates."""

    permission_classes = [AllowAny]
    content_negotiation_class = JSONOnlyNegotiation

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return ``{"data": ..., "cached": ...}`` for ``lat``/``lon``."""
        try:
            latitude, longitude = _coordinates(request)
        except ValidationError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = get_weather_service().get_weather(latitude, longitude)
        except Exception as exc:  # noqa: BLE001 - every failure is reported as 500
            logger.error("Weather lookup for %s,%s failed", latitude, longitude, exc_info=exc)
            return Response({"error": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(result.as_dict(), status=status.HTTP_200_OK)
