"""
Boundary commands exposed to the host application.
"""

from .deps import configure, get_notifier, get_relay, reset
from .handlers import (
    COMMANDS,
    graphql_request,
    greet,
    http_request,
    request_notification_permission,
    send_notification,
)

__all__ = [
    "COMMANDS",
    "configure",
    "get_notifier",
    "get_relay",
    "graphql_request",
    "greet",
    "http_request",
    "request_notification_permission",
    "reset",
    "send_notification",
]
