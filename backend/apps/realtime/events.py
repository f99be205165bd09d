"""
Real-time event catalog.

Event names are part of the client contract (the dashboard listens for
them on the Socket.IO connection), so they are defined once here.
"""

from enum import StrEnum


class RealtimeEvent(StrEnum):
    """Events pushed to organization rooms."""

    SERVICE_CREATED = "service:created"
    SERVICE_UPDATED = "service:updated"
    SERVICE_DELETED = "service:deleted"
    INCIDENT_CREATED = "incident:created"
    INCIDENT_UPDATED = "incident:updated"
    INCIDENT_RESOLVED = "incident:resolved"


# Client-emitted subscription messages
JOIN_ORGANIZATION = "join:organization"
LEAVE_ORGANIZATION = "leave:organization"


def organization_room(organization_id: str) -> str:
    """Room name grouping all subscribers of an organization."""
    return f"org:{organization_id}"
