"""
Boundary Commands

The functions a host binds to its invoke mechanism. Each returns a plain
value on success and raises CommandError whose message is the flattened
failure text on error.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from bridge.notifications import (
    NotificationCapability,
    request_notification_permission as _request_permission,
    send_notification as _send_notification,
)
from bridge.schemas import CommandError, ErrorCodes, RelayFailure

from .deps import get_notifier, get_relay


def greet(name: str) -> str:
    return f"Hello, {name}! You've been greeted from Python!"


def graphql_request(
    url: str,
    body: str,
    headers: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Relay a POST request.

    Returns:
        The response body on a 2xx status

    Raises:
        CommandError: with the timeout, transport or "HTTP <code>: <body>" message
    """
    outcome = get_relay().relay(url, body, headers or {})
    if isinstance(outcome, RelayFailure):
        raise CommandError.from_error_model(outcome.to_error_model())
    return outcome.body


http_request = graphql_request


def _require_notifier() -> NotificationCapability:
    notifier = get_notifier()
    if notifier is None:
        raise CommandError(
            "Notification capability not configured",
            code=ErrorCodes.NOTIFICATION_ERROR,
        )
    return notifier


def send_notification(title: str, body: str) -> None:
    outcome = _send_notification(_require_notifier(), title, body)
    if not outcome.ok:
        raise CommandError.from_error_model(outcome.to_error_model())


def request_notification_permission() -> str:
    outcome = _request_permission(_require_notifier())
    if not outcome.ok:
        raise CommandError.from_error_model(outcome.to_error_model())
    return outcome.value


COMMANDS: dict[str, Callable[..., Any]] = {
    "greet": greet,
    "graphql_request": graphql_request,
    "http_request": http_request,
    "send_notification": send_notification,
    "request_notification_permission": request_notification_permission,
}
