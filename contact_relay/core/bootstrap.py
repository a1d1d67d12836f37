"""Process start-up checks.

The ASGI entrypoint and ``manage.py serve`` call :func:`ensure_database_configured`
before any route is mounted, so a missing connection string stops the
process instead of serving requests that can only fail.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from django.conf import settings
from django.db import connection

from contact_relay.core.exceptions import StartupConfigError

logger = logging.getLogger(__name__)


def require_database_url(url: str | None) -> str:
    if not url:
        msg = "DATABASE_URL is missing! Set DATABASE_URL in the environment or .env"
        raise StartupConfigError(msg)
    return url


def ensure_database_configured() -> str:
    """Return the configured database URL or exit the process with status 1."""

    try:
        return require_database_url(getattr(settings, "DATABASE_URL", ""))
    except StartupConfigError as exc:
        logger.error("❌ %s", exc)  # noqa: TRY400
        sys.exit(1)


def check_database_connection() -> dict[str, Any]:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True}


def log_database_connection() -> bool:
    """Log whether the database answers; a failure is reported, not fatal."""

    result = check_database_connection()
    if result["ok"]:
        logger.info("✅ Database connected successfully!")
    else:
        logger.error("❌ Database connection error: %s", result["error"])
    return bool(result["ok"])
