"""Per-connection lifecycle: Connected -> (frames)* -> Disconnected."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Awaitable
from collections.abc import Callable

logger = logging.getLogger(__name__)

ACKNOWLEDGEMENT = "Message received!"

SendText = Callable[[str], Awaitable[None]]


class SessionState(enum.Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class RealtimeSession:
    """Hooks for one live socket connection.

    ``send`` delivers a text frame to this connection only. Each inbound frame
    gets exactly one acknowledgement; the lock keeps acknowledgements in the
    order frames were received even if the transport dispatches them as
    concurrent tasks.
    """

    def __init__(self, connection_id: str, send: SendText) -> None:
        self.connection_id = connection_id
        self._send = send
        self._lock = asyncio.Lock()
        self.state = SessionState.CONNECTED
        self.frames_received = 0

    async def on_connect(self) -> None:
        logger.info("🔌 Client connected: %s", self.connection_id)

    async def on_frame(self, text: str) -> None:
        async with self._lock:
            if self.state is SessionState.DISCONNECTED:
                logger.warning(
                    "Dropping frame for closed connection %s",
                    self.connection_id,
                )
                return
            self.frames_received += 1
            logger.info("📩 Message from %s: %s", self.connection_id, text)
            await self._send(ACKNOWLEDGEMENT)

    async def on_disconnect(self, reason: str | None = None) -> None:
        self.state = SessionState.DISCONNECTED
        logger.info(
            "❌ Client disconnected: %s (%s)",
            self.connection_id,
            reason or "closed",
        )


class SessionRegistry:
    """Live sessions keyed by connection id; closing a session forgets it."""

    def __init__(self) -> None:
        self._sessions: dict[str, RealtimeSession] = {}

    async def open(self, connection_id: str, send: SendText) -> RealtimeSession:
        session = RealtimeSession(connection_id, send)
        self._sessions[connection_id] = session
        await session.on_connect()
        return session

    def get(self, connection_id: str) -> RealtimeSession | None:
        return self._sessions.get(connection_id)

    async def close(self, connection_id: str, reason: str | None = None) -> None:
        session = self._sessions.pop(connection_id, None)
        if session is not None:
            await session.on_disconnect(reason)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
