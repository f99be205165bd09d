"""
Custom type definitions for the application.

These types help mypy understand custom attributes added by middleware.
"""

from typing import TYPE_CHECKING
from uuid import UUID

from django.http import HttpRequest

if TYPE_CHECKING:
    from apps.core.auth import AuthContext
    from apps.core.authorization import OrganizationAccessPolicy
    from apps.realtime.notifiers import Notifier


class StatusPageHttpRequest(HttpRequest):
    """
    HttpRequest with the attributes our middleware and auth class attach.

    - correlation_id: CorrelationIdMiddleware
    - access_policy: AccessPolicyMiddleware
    - notifier: NotifierMiddleware
    - auth: IdentityAuth (authenticated routers only)
    """

    correlation_id: UUID
    access_policy: "OrganizationAccessPolicy"
    notifier: "Notifier"
    auth: "AuthContext"
