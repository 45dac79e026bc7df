"""
Notification Service

Host-facing helper that caches the permission state, asks for permission
before the first notification, and never raises.
"""

from __future__ import annotations

import logging
from typing import Literal

from .base import (
    NotificationCapability,
    PermissionState,
    request_notification_permission,
    send_notification,
)

logger = logging.getLogger(__name__)

ChangeType = Literal["new", "updated"]

PR_NOTIFICATION_TITLES: dict[str, str] = {
    "new": "New pull request",
    "updated": "Pull request updated",
}


class NotificationService:
    """
    Permission-aware notification sender.

    Usage:
        service = NotificationService(capability)
        service.send_pr_update_notification("Fix login flow", "new")
    """

    def __init__(self, capability: NotificationCapability) -> None:
        self._capability = capability
        self._permission_granted = False

    @property
    def permission_granted(self) -> bool:
        return self._permission_granted

    def request_permission(self) -> bool:
        """Ask for permission and cache whether it was granted."""
        outcome = request_notification_permission(self._capability)
        if not outcome.ok:
            logger.error(f"Failed to request notification permission: {outcome.message}")
            self._permission_granted = False
            return False
        self._permission_granted = outcome.value == PermissionState.GRANTED.value
        return self._permission_granted

    def send_notification(self, title: str, body: str) -> bool:
        """
        Show a notification, requesting permission first if needed.

        Returns:
            True if the notification was handed to the OS
        """
        if not self._permission_granted and not self.request_permission():
            logger.warning("Notification permission not granted")
            return False

        outcome = send_notification(self._capability, title, body)
        if not outcome.ok:
            logger.error(f"Failed to send notification: {outcome.message}")
            return False
        return True

    def send_pr_update_notification(self, pr_title: str, change_type: ChangeType) -> bool:
        """Notify about a new or updated pull request."""
        if change_type not in PR_NOTIFICATION_TITLES:
            raise ValueError(f"Unknown change type: {change_type!r}")
        return self.send_notification(PR_NOTIFICATION_TITLES[change_type], pr_title)
