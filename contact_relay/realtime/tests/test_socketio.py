from unittest import mock

import pytest
from asgiref.sync import async_to_sync

from contact_relay.realtime import socketio as realtime_socketio
from contact_relay.realtime.session import ACKNOWLEDGEMENT
from contact_relay.realtime.session import SessionRegistry


@pytest.fixture
def sio_send(monkeypatch):
    send = mock.AsyncMock()
    monkeypatch.setattr(realtime_socketio.sio, "send", send)
    monkeypatch.setattr(realtime_socketio, "sessions", SessionRegistry())
    return send


def test_message_event_is_acknowledged_to_sender_only(sio_send):
    async def scenario():
        await realtime_socketio.connect("sid-1", {})
        await realtime_socketio.connect("sid-2", {})
        await realtime_socketio.message("sid-1", "hello")

    async_to_sync(scenario)()

    sio_send.assert_awaited_once_with(ACKNOWLEDGEMENT, to="sid-1")


def test_one_acknowledgement_per_message(sio_send):
    async def scenario():
        await realtime_socketio.connect("sid-1", {})
        for payload in ("a", {"text": "b"}, b"c"):
            await realtime_socketio.message("sid-1", payload)

    async_to_sync(scenario)()

    assert sio_send.await_count == 3
    assert sio_send.await_args_list == [
        mock.call(ACKNOWLEDGEMENT, to="sid-1"),
    ] * 3


def test_disconnect_releases_session(sio_send):
    async def scenario():
        await realtime_socketio.connect("sid-1", {})
        await realtime_socketio.disconnect("sid-1", "client disconnect")

    async_to_sync(scenario)()

    assert "sid-1" not in realtime_socketio.sessions


def test_message_after_disconnect_is_dropped(sio_send, caplog):
    async def scenario():
        await realtime_socketio.connect("sid-1", {})
        await realtime_socketio.disconnect("sid-1", "client disconnect")
        await realtime_socketio.message("sid-1", "late")

    async_to_sync(scenario)()

    sio_send.assert_not_awaited()
    assert "sid-1" not in realtime_socketio.sessions
    assert len(realtime_socketio.sessions) == 0
    assert "Dropping frame for unknown connection sid-1" in caplog.text


def test_message_for_unknown_sid_opens_no_session(sio_send):
    async_to_sync(realtime_socketio.message)("sid-9", "hi")

    sio_send.assert_not_awaited()
    assert len(realtime_socketio.sessions) == 0
