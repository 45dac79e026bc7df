"""
Notifications Module

Injected OS notification capability and its thin wrappers.
"""

from .base import (
    NotificationCapability,
    NotificationFailure,
    NotificationOutcome,
    NotificationSuccess,
    PermissionState,
    request_notification_permission,
    send_notification,
)
from .mock import MockNotifier
from .service import NotificationService

__all__ = [
    "NotificationCapability",
    "NotificationFailure",
    "NotificationOutcome",
    "NotificationSuccess",
    "PermissionState",
    "request_notification_permission",
    "send_notification",
    "MockNotifier",
    "NotificationService",
]
