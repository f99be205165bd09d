"""
Socket.IO server - organization-scoped subscription rooms.

Clients connect to /socket.io/ and emit 'join:organization' with an
organization ID to receive that organization's events. Subscribing is not
tied to membership; the events carry no data beyond what the public status
page already shows for the same records.
"""

import socketio

from apps.core.logging import get_logger
from apps.realtime.events import JOIN_ORGANIZATION, LEAVE_ORGANIZATION, organization_room

logger = get_logger(__name__)

# Engine.IO heartbeat (seconds)
PING_INTERVAL = 25
PING_TIMEOUT = 60


def register_handlers(server: socketio.Server) -> None:
    """Attach connection and room subscription handlers to the server."""

    @server.event
    def connect(sid: str, environ: dict, auth: dict | None = None) -> None:
        logger.info("realtime_client_connected", sid=sid)

    @server.on(JOIN_ORGANIZATION)
    def join_organization(sid: str, organization_id: str) -> None:
        if not organization_id:
            logger.warning("realtime_join_without_organization", sid=sid)
            return
        server.enter_room(sid, organization_room(str(organization_id)))
        logger.info("realtime_client_joined", sid=sid, organization_id=str(organization_id))

    @server.on(LEAVE_ORGANIZATION)
    def leave_organization(sid: str, organization_id: str) -> None:
        if not organization_id:
            return
        server.leave_room(sid, organization_room(str(organization_id)))
        logger.info("realtime_client_left", sid=sid, organization_id=str(organization_id))

    @server.event
    def disconnect(sid: str, *args) -> None:
        logger.info("realtime_client_disconnected", sid=sid)


def create_socket_server(cors_allowed_origins: list[str] | str) -> socketio.Server:
    """
    Build the Socket.IO server used by the WSGI entry point and SocketIONotifier.

    Runs in threading mode so it can share the Django WSGI process.
    """
    server = socketio.Server(
        async_mode="threading",
        cors_allowed_origins=cors_allowed_origins,
        ping_interval=PING_INTERVAL,
        ping_timeout=PING_TIMEOUT,
        logger=False,
        engineio_logger=False,
    )
    register_handlers(server)
    return server
