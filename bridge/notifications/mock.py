"""
In-memory notification capability for tests and headless hosts.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from .base import NotificationCapability, PermissionState


class MockNotifier(NotificationCapability):
    """
    Mock capability.

    Records shown notifications and returns a preset permission state.
    Can be configured to raise from either call.
    """

    def __init__(
        self,
        *,
        permission: Union[PermissionState, str] = PermissionState.GRANTED,
        show_error: Optional[Exception] = None,
        permission_error: Optional[Exception] = None,
    ) -> None:
        self.permission = permission
        self.show_error = show_error
        self.permission_error = permission_error
        self._shown: list[dict[str, Any]] = []
        self.permission_requests = 0

    @property
    def shown(self) -> list[dict[str, Any]]:
        """Get all displayed notifications."""
        return self._shown

    def show(self, title: str, body: str) -> None:
        if self.show_error is not None:
            raise self.show_error
        self._shown.append({"title": title, "body": body})

    def request_permission(self) -> Union[PermissionState, str]:
        self.permission_requests += 1
        if self.permission_error is not None:
            raise self.permission_error
        return self.permission

    def reset(self) -> None:
        """Clear recorded notifications and the request counter."""
        self._shown.clear()
        self.permission_requests = 0
