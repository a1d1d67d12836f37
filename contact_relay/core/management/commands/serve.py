from __future__ import annotations

import logging

import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser

from contact_relay.core.bootstrap import ensure_database_configured
from contact_relay.core.bootstrap import log_database_connection

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Run the HTTP + realtime ASGI server (uvicorn) on HOST:PORT"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--host",
            dest="host",
            help="Interface to bind (defaults to the HOST setting)",
        )
        parser.add_argument(
            "--port",
            dest="port",
            type=int,
            help="Port to listen on (defaults to the PORT setting)",
        )

    def handle(self, *args, **options) -> None:
        # Exits with status 1 when DATABASE_URL is unset.
        ensure_database_configured()
        log_database_connection()

        host: str = options.get("host") or settings.HOST
        port: int = options.get("port") or settings.PORT

        logger.info("🚀 Server running on port %s", port)
        # uvicorn installs SIGINT/SIGTERM handlers and shuts down gracefully.
        uvicorn.run(
            "config.asgi:application",
            host=host,
            port=port,
            log_config=None,
        )
