"""
Realtime middleware.
"""

from collections.abc import Callable

from django.apps import apps
from django.http import HttpRequest, HttpResponse


class NotifierMiddleware:
    """
    Attach the notifier built by RealtimeConfig to the request.

    API handlers pass request.notifier into service functions, so no code
    below the HTTP layer looks the notifier up on its own.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.notifier = apps.get_app_config("realtime").notifier

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.notifier = self.notifier  # type: ignore[attr-defined]
        return self.get_response(request)
