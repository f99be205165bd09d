"""
Core security - identity resolution for API endpoints.
"""

from django.conf import settings
from django.http import HttpRequest
from ninja.security import APIKeyHeader

from apps.core.auth import AuthContext
from apps.core.logging import bind_contextvars


class IdentityAuth(APIKeyHeader):
    """
    Resolve the caller identity into an AuthContext.

    When AUTH_FIXED_USER_ID is configured (local development and tests)
    every request acts as that user. Otherwise the identity is read from
    the X-User-Id header set by the upstream identity provider; a missing
    header yields 401.
    """

    param_name = "X-User-Id"

    def __call__(self, request: HttpRequest) -> AuthContext | None:
        fixed_user_id = getattr(settings, "AUTH_FIXED_USER_ID", "")
        if fixed_user_id:
            return self.authenticate(request, fixed_user_id)
        return super().__call__(request)

    def authenticate(self, request: HttpRequest, key: str | None) -> AuthContext | None:
        if not key:
            return None

        fixed_user_id = getattr(settings, "AUTH_FIXED_USER_ID", "")
        if fixed_user_id and key == fixed_user_id:
            email = getattr(settings, "AUTH_FIXED_USER_EMAIL", "")
        else:
            email = request.headers.get("X-User-Email", "")

        bind_contextvars(**{"usr.id": key})
        return AuthContext(user_id=key, email=email)


def get_auth(request: HttpRequest) -> AuthContext:
    """
    Return the AuthContext set by IdentityAuth.

    Only call from endpoints protected by IdentityAuth; ninja rejects the
    request with 401 before the handler runs otherwise.
    """
    auth = getattr(request, "auth", None)
    if not isinstance(auth, AuthContext):
        raise RuntimeError("IdentityAuth did not run for this endpoint")
    return auth
