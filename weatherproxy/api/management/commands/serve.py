"""Start the development HTTP server on the configured port.

Production deployments should serve ``weatherproxy.wsgi:application`` from a
WSGI server such as gunicorn instead.
"""
from __future__ import annotations

import logging
from typing import Any

from django.core.management import call_command
from django.core.management.base import BaseCommand

from weatherproxy.config import ProviderConfig
from weatherproxy.core.errors import ConfigurationError


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Serve GET /weather on 0.0.0.0:<PORT>"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--port", type=int, help="TCP port (defaults to the PORT environment variable)")
        parser.add_argument("--noreload", action="store_true", help="Disable the auto-reloader")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        config = ProviderConfig.from_settings()
        port = options.get("port") or config.port
        try:
            config.kind
        except ConfigurationError as exc:
            # Keep serving; each request reports the misconfiguration as a 500.
            logger.error("%s; every request will fail", exc)

        logger.info("weather app listening on %s, provider=%s", port, config.provider)
        call_command("runserver", f"0.0.0.0:{port}", use_reloader=not options.get("noreload"))
