"""Socket.IO server for browser clients.

Current frontend convention:
- URL base: ws://<host>:<PORT> (same listener as the HTTP API)
- Socket.IO path: /socket.io/ (library default)
- Client sends with ``socket.send(text)``; the server answers with one
  ``message`` event carrying the acknowledgement text.

No authentication: any client the transport accepts gets a session.
"""

from __future__ import annotations

import logging
from typing import Any

import socketio
from django.conf import settings

from .session import SendText
from .session import SessionRegistry

logger = logging.getLogger(__name__)

sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=getattr(settings, "CORS_ALLOWED_ORIGINS", "*"),
    logger=False,
    engineio_logger=False,
)

sessions = SessionRegistry()


def _sender_for(sid: str) -> SendText:
    async def send(text: str) -> None:
        await sio.send(text, to=sid)

    return send


def _frame_text(data: Any) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode(errors="replace")
    return data if isinstance(data, str) else str(data)


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    await sessions.open(sid, _sender_for(sid))


@sio.event
async def message(sid: str, data: Any):
    session = sessions.get(sid)
    if session is None:
        # Unknown or already disconnected sid; never resurrect a session.
        logger.warning("Dropping frame for unknown connection %s", sid)
        return
    await session.on_frame(_frame_text(data))


@sio.event
async def disconnect(sid: str, reason: Any | None = None):
    # Drops the session; python-socketio cleans up its own rooms.
    await sessions.close(sid, str(reason) if reason is not None else None)
