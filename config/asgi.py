"""
ASGI config for contact_relay project.

It exposes the ASGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/dev/howto/deployment/asgi/

"""

import os

from django.core.asgi import get_asgi_application

# If DJANGO_SETTINGS_MODULE is unset, select a sensible default based on BUILD_ENV
# Default to local settings for the local dev image, production otherwise.
if "DJANGO_SETTINGS_MODULE" not in os.environ:
    build_env = os.environ.get("BUILD_ENV", "production").lower()
    default_settings = (
        "config.settings.local"
        if build_env == "local"
        else "config.settings.production"
    )
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", default_settings)

django_application = get_asgi_application()

from channels.routing import ProtocolTypeRouter  # noqa: E402
from channels.routing import URLRouter  # noqa: E402
from socketio import ASGIApp  # noqa: E402

from contact_relay.core.bootstrap import ensure_database_configured  # noqa: E402

# Exits the process before anything is mounted when DATABASE_URL is unset.
ensure_database_configured()

from contact_relay.realtime.routing import websocket_urlpatterns  # noqa: E402
from contact_relay.realtime.socketio import sio  # noqa: E402

protocol_application = ProtocolTypeRouter(
    {
        "http": django_application,
        "websocket": URLRouter(websocket_urlpatterns),
    },
)

# Socket.IO must sit above the ProtocolTypeRouter because it uses BOTH:
# - HTTP long-polling (Engine.IO)
# - WebSocket upgrades
# Everything outside /socket.io/ falls through to Django / Channels.
application = ASGIApp(
    sio,
    other_asgi_app=protocol_application,
    socketio_path="socket.io",
)
