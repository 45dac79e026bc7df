"""
Schemas

Public API for relay models and the error taxonomy.
"""

from .errors import (
    BridgeError,
    BridgeException,
    CommandError,
    ConfigError,
    ErrorCodes,
)
from .relay import (
    DEFAULT_TIMEOUT_SECONDS,
    RETRYABLE_STATUS_CODES,
    FailureKind,
    RelayFailure,
    RelayOutcome,
    RelayRequest,
    RelayResponse,
    RelaySuccess,
    timeout_message,
)

__all__ = [
    # Errors
    "BridgeError",
    "BridgeException",
    "CommandError",
    "ConfigError",
    "ErrorCodes",
    # Relay
    "DEFAULT_TIMEOUT_SECONDS",
    "RETRYABLE_STATUS_CODES",
    "FailureKind",
    "RelayFailure",
    "RelayOutcome",
    "RelayRequest",
    "RelayResponse",
    "RelaySuccess",
    "timeout_message",
]
