"""Realtime app configuration."""

from django.apps import AppConfig
from django.conf import settings


class RealtimeConfig(AppConfig):
    """
    Configuration for realtime app.

    Builds the Socket.IO server and the notifier once at start-up. Both are
    handed out explicitly: the WSGI entry point mounts the server and
    NotifierMiddleware attaches the notifier to each request.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.realtime"

    def ready(self) -> None:
        from apps.realtime.notifiers import build_notifier
        from apps.realtime.server import create_socket_server

        self.server = create_socket_server(settings.SOCKETIO_CORS_ALLOWED_ORIGINS)
        self.notifier = build_notifier(settings.REALTIME_BACKEND, server=self.server)
