"""
Error taxonomy shared by the relay, notification wrappers and boundary commands.

Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the bridge."""

    # Relay Errors
    RELAY_TIMEOUT = "RELAY_TIMEOUT"
    RELAY_TRANSPORT_ERROR = "RELAY_TRANSPORT_ERROR"
    RELAY_HTTP_STATUS = "RELAY_HTTP_STATUS"

    # Notification Errors
    NOTIFICATION_ERROR = "NOTIFICATION_ERROR"
    NOTIFICATION_PERMISSION_ERROR = "NOTIFICATION_PERMISSION_ERROR"

    # Configuration & Command Errors
    CONFIG_ERROR = "CONFIG_ERROR"
    COMMAND_ERROR = "COMMAND_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class BridgeError(BaseModel):
    """
    Base error model for structured error communication.

    Used for passing errors between layers without exceptions,
    enabling structured error handling and serialization.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.RELAY_TIMEOUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class BridgeException(Exception):
    """
    Base exception for all bridge errors.

    Carries structured error information mirroring a BridgeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "BRIDGE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ConfigError(BridgeException):
    """Exception raised when runtime configuration is invalid."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code=ErrorCodes.CONFIG_ERROR, details=details)


class CommandError(BridgeException):
    """
    Failure surfaced through the host's error channel.

    ``str(error)`` is exactly the flattened failure message, so hosts that
    match on message text (notably the timeout message) keep working.
    """

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.COMMAND_ERROR,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message, code=code, details=details, retryable=retryable)

    @classmethod
    def from_error_model(cls, error: BridgeError) -> "CommandError":
        """Build the boundary exception for a structured error."""
        return cls(
            error.message,
            code=error.code,
            details=error.details,
            retryable=error.retryable,
        )
