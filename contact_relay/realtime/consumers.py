from __future__ import annotations

import uuid

from channels.generic.websocket import AsyncWebsocketConsumer

from .session import RealtimeSession


class AcknowledgementConsumer(AsyncWebsocketConsumer):
    """Raw WebSocket endpoint: every inbound frame is answered once."""

    session: RealtimeSession | None = None

    async def connect(self):
        await self.accept()
        self.session = RealtimeSession(f"ws-{uuid.uuid4().hex[:12]}", self._send_text)
        await self.session.on_connect()

    async def receive(self, text_data=None, bytes_data=None):
        if self.session is None:
            return
        if text_data is None and bytes_data is not None:
            text_data = bytes_data.decode(errors="replace")
        await self.session.on_frame(text_data or "")

    async def disconnect(self, code):
        if self.session is not None:
            await self.session.on_disconnect(f"code {code}")
            self.session = None

    async def _send_text(self, text: str) -> None:
        await self.send(text_data=text)
