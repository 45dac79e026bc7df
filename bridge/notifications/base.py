"""
Notification capability interface and pass-through wrappers.

The host injects a NotificationCapability backed by the OS notification
system; the bridge never constructs one itself.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from bridge.schemas.errors import BridgeError, ErrorCodes

logger = logging.getLogger(__name__)


class PermissionState(str, Enum):
    """Notification permission states reported by the host OS."""
    GRANTED = "granted"
    DENIED = "denied"
    PROMPT = "prompt"
    PROMPT_WITH_RATIONALE = "prompt-with-rationale"

    def __str__(self) -> str:
        return self.value


class NotificationCapability(ABC):
    """
    Abstract OS notification capability.
    """

    @abstractmethod
    def show(self, title: str, body: str) -> None:
        """
        Display a notification.

        Raises:
            Exception: if the OS rejects the request
        """
        ...

    @abstractmethod
    def request_permission(self) -> Union[PermissionState, str]:
        """
        Ask the OS for notification permission.

        Returns:
            The resulting permission state
        """
        ...


class NotificationSuccess(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    outcome: Literal["success"] = "success"
    value: Optional[str] = None

    @property
    def ok(self) -> bool:
        return True


class NotificationFailure(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    outcome: Literal["failure"] = "failure"
    code: str = ErrorCodes.NOTIFICATION_ERROR
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_error_model(self) -> BridgeError:
        return BridgeError(code=self.code, message=self.message)


NotificationOutcome = Annotated[
    Union[NotificationSuccess, NotificationFailure],
    Field(discriminator="outcome"),
]


def send_notification(
    capability: NotificationCapability,
    title: str,
    body: str,
) -> NotificationOutcome:
    """Show a notification; OS rejections become a failure outcome."""
    try:
        capability.show(title, body)
    except Exception as e:
        logger.warning(f"Notification capability rejected show(): {e}")
        return NotificationFailure(message=str(e) or type(e).__name__)
    return NotificationSuccess()


def request_notification_permission(
    capability: NotificationCapability,
) -> NotificationOutcome:
    """Request permission; success carries the state string (e.g. "granted")."""
    try:
        state = capability.request_permission()
    except Exception as e:
        logger.warning(f"Notification permission request failed: {e}")
        return NotificationFailure(
            code=ErrorCodes.NOTIFICATION_PERMISSION_ERROR,
            message=str(e) or type(e).__name__,
        )
    return NotificationSuccess(value=str(state))
