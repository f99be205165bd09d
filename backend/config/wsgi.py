"""
WSGI config for the backend.

Wraps the Django application in the Socket.IO WSGI app so /socket.io/ and
the HTTP API share one process. The server instance is the one the
realtime app built at start-up, so notifier broadcasts reach these clients.
"""

import os

import socketio
from django.apps import apps
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.production")

django_application = get_wsgi_application()

application = socketio.WSGIApp(
    apps.get_app_config("realtime").server,
    django_application,
)
