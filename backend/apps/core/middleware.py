"""
Core middleware.
"""

import time
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from apps.core.authorization import get_access_policy
from apps.core.logging import bind_contextvars, clear_contextvars, get_logger

logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware:
    """
    Attach a correlation ID to every request.

    Reuses a valid UUID from the X-Correlation-ID header or generates one,
    binds it into the structlog context and echoes it on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        correlation_id = self._parse(request.headers.get(CORRELATION_ID_HEADER))
        request.correlation_id = correlation_id  # type: ignore[attr-defined]

        clear_contextvars()
        bind_contextvars(correlation_id=str(correlation_id))
        try:
            response = self.get_response(request)
        finally:
            clear_contextvars()

        response[CORRELATION_ID_HEADER] = str(correlation_id)
        return response

    @staticmethod
    def _parse(value: str | None) -> uuid.UUID:
        if value:
            try:
                return uuid.UUID(value)
            except ValueError:
                pass
        return uuid.uuid4()


class RequestLoggingMiddleware:
    """Log one line per request with method, path, status and duration."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        start = time.monotonic()
        bind_contextvars(**{"http.method": request.method, "http.path": request.path})

        response = self.get_response(request)

        logger.info(
            "request_completed",
            **{"http.status_code": response.status_code},
            duration_ms=(time.monotonic() - start) * 1000,
        )
        return response


class AccessPolicyMiddleware:
    """
    Attach the organization access policy to the request.

    The policy is built once from settings when the middleware chain is
    loaded, so endpoints receive it through request.access_policy.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.access_policy = get_access_policy()

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.access_policy = self.access_policy  # type: ignore[attr-defined]
        return self.get_response(request)
