"""
Notifiers - pluggable real-time broadcast backends.

LocalNotifier: Logs broadcasts (development, tests)
SocketIONotifier: Emits to Socket.IO rooms (production)

Delivery is best-effort. A failing emit is logged and swallowed so the
HTTP request that triggered it is never affected; nothing is retried.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from django.utils import timezone

from apps.core.logging import get_logger
from apps.realtime.events import RealtimeEvent, organization_room

if TYPE_CHECKING:
    import socketio

logger = get_logger(__name__)


class Notifier(ABC):
    """Abstract base class for real-time broadcast backends."""

    backend_name = "abstract"

    @abstractmethod
    def emit(self, event: str, payload: dict[str, Any], room: str | None = None) -> None:
        """
        Deliver one payload.

        room=None means every connected client.
        """

    def broadcast(self, organization_id: str, event: RealtimeEvent, data: dict[str, Any]) -> bool:
        """
        Push an event to every subscriber of the organization.

        Appends an ISO-8601 timestamp to the payload. Returns False if the
        backend raised; the error is logged, never propagated.
        """
        return self._deliver(event, data, room=organization_room(organization_id))

    def broadcast_global(self, event: RealtimeEvent, data: dict[str, Any]) -> bool:
        """
        Push an event to all connected clients, whatever rooms they joined.

        None of the record mutations call this; they are all organization
        scoped. It is the entry point for announcements that concern every
        listener, such as platform-wide maintenance notices.
        """
        return self._deliver(event, data, room=None)

    def _deliver(self, event: RealtimeEvent, data: dict[str, Any], room: str | None) -> bool:
        payload = {**data, "timestamp": timezone.now().isoformat()}
        try:
            self.emit(str(event), payload, room=room)
        except Exception as e:
            logger.error(
                "realtime_broadcast_failed",
                event_type=str(event),
                room=room or "*",
                backend=self.backend_name,
                error=str(e),
            )
            return False

        logger.debug(
            "realtime_broadcast",
            event_type=str(event),
            room=room or "*",
            backend=self.backend_name,
        )
        return True


class LocalNotifier(Notifier):
    """
    Local development backend.

    Logs what would have been pushed, with the same payload shape as
    production.
    """

    backend_name = "local"

    def emit(self, event: str, payload: dict[str, Any], room: str | None = None) -> None:
        logger.info(
            "realtime_event_emitted",
            event_type=event,
            room=room or "*",
            payload_keys=sorted(payload),
            backend=self.backend_name,
        )


class SocketIONotifier(Notifier):
    """Socket.IO backend emitting through a python-socketio server."""

    backend_name = "socketio"

    def __init__(self, server: "socketio.Server") -> None:
        self.server = server

    def emit(self, event: str, payload: dict[str, Any], room: str | None = None) -> None:
        self.server.emit(event, payload, to=room)


def build_notifier(backend_type: str, server: "socketio.Server | None" = None) -> Notifier:
    """
    Construct the notifier for a REALTIME_BACKEND value: 'local' or 'socketio'.
    """
    if backend_type == "socketio":
        if server is None:
            raise ValueError("A Socket.IO server is required for the socketio backend")
        return SocketIONotifier(server)
    if backend_type == "local":
        return LocalNotifier()
    raise ValueError(f"Unknown REALTIME_BACKEND: {backend_type!r}")
