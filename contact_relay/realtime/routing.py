from django.urls import path

from . import consumers

websocket_urlpatterns = [
    # Raw WebSocket clients (no Socket.IO framing).
    path("ws/", consumers.AcknowledgementConsumer.as_asgi()),
]
