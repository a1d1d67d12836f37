import pytest
from asgiref.sync import async_to_sync
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator

from contact_relay.realtime.routing import websocket_urlpatterns
from contact_relay.realtime.session import ACKNOWLEDGEMENT

# Channels consumers close stale DB connections on every dispatch.
pytestmark = pytest.mark.django_db


def _application():
    return URLRouter(websocket_urlpatterns)


def test_text_frame_gets_single_acknowledgement():
    async def scenario():
        communicator = WebsocketCommunicator(_application(), "/ws/")
        connected, _ = await communicator.connect()
        assert connected

        await communicator.send_to(text_data="hello")
        assert await communicator.receive_from() == ACKNOWLEDGEMENT
        assert await communicator.receive_nothing()

        await communicator.disconnect()

    async_to_sync(scenario)()


def test_acknowledgements_follow_receipt_order():
    async def scenario():
        communicator = WebsocketCommunicator(_application(), "/ws/")
        await communicator.connect()

        for i in range(5):
            await communicator.send_to(text_data=f"frame {i}")
        replies = [await communicator.receive_from() for _ in range(5)]
        assert replies == [ACKNOWLEDGEMENT] * 5
        assert await communicator.receive_nothing()

        await communicator.disconnect()

    async_to_sync(scenario)()


def test_binary_frame_is_acknowledged_as_text():
    async def scenario():
        communicator = WebsocketCommunicator(_application(), "/ws/")
        await communicator.connect()

        await communicator.send_to(bytes_data=b"\xffbinary")
        assert await communicator.receive_from() == ACKNOWLEDGEMENT

        await communicator.disconnect()

    async_to_sync(scenario)()


def test_websocket_shares_the_http_application():
    from config.asgi import application

    async def scenario():
        communicator = WebsocketCommunicator(application, "/ws/")
        connected, _ = await communicator.connect()
        assert connected

        await communicator.send_to(text_data="over the shared listener")
        assert await communicator.receive_from() == ACKNOWLEDGEMENT

        await communicator.disconnect()

    async_to_sync(scenario)()
