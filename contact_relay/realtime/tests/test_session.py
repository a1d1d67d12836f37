import asyncio

from asgiref.sync import async_to_sync

from contact_relay.realtime.session import ACKNOWLEDGEMENT
from contact_relay.realtime.session import RealtimeSession
from contact_relay.realtime.session import SessionRegistry
from contact_relay.realtime.session import SessionState


class Recorder:
    def __init__(self, delays=None):
        self.sent: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self._delays = list(delays or [])

    async def __call__(self, text: str) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        if self._delays:
            await asyncio.sleep(self._delays.pop(0))
        self.sent.append(text)
        self.in_flight -= 1


def test_each_frame_gets_exactly_one_acknowledgement():
    recorder = Recorder()
    session = RealtimeSession("conn-1", recorder)

    async def scenario():
        await session.on_connect()
        for text in ("hello", "", "🚀 unicode"):
            await session.on_frame(text)

    async_to_sync(scenario)()

    assert recorder.sent == ["Message received!"] * 3
    assert session.frames_received == 3


def test_concurrent_frames_are_acknowledged_one_at_a_time():
    # Earlier sends are slower; without serialisation they would overlap.
    recorder = Recorder(delays=[0.03, 0.02, 0.01])
    session = RealtimeSession("conn-2", recorder)

    async def scenario():
        await asyncio.gather(*(session.on_frame(str(i)) for i in range(3)))

    async_to_sync(scenario)()

    assert recorder.sent == [ACKNOWLEDGEMENT] * 3
    assert recorder.max_in_flight == 1


def test_frames_after_disconnect_are_dropped(caplog):
    recorder = Recorder()
    session = RealtimeSession("conn-3", recorder)

    async def scenario():
        await session.on_disconnect("client left")
        await session.on_frame("late")

    async_to_sync(scenario)()

    assert session.state is SessionState.DISCONNECTED
    assert recorder.sent == []
    assert "Dropping frame" in caplog.text


def test_registry_forgets_closed_sessions():
    registry = SessionRegistry()

    async def scenario():
        session = await registry.open("a", Recorder())
        assert registry.get("a") is session
        assert "a" in registry
        await registry.close("a", "transport close")
        await registry.close("a")  # second close is a no-op
        return session

    session = async_to_sync(scenario)()

    assert session.state is SessionState.DISCONNECTED
    assert registry.get("a") is None
    assert len(registry) == 0
