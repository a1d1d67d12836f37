"""
WSGI config for contact_relay project.

Serves the HTTP API only; the realtime endpoints need the ASGI application
in ``config.asgi``.

"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.production")

application = get_wsgi_application()
