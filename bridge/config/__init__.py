"""
Runtime Configuration Module

Provides configuration loading and management for the bridge.
"""

from .runtime import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_USER_AGENT,
    RelayConfig,
    RetryConfig,
    RuntimeConfig,
    configure_logging,
    get_default_config,
    set_default_config,
)

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_USER_AGENT",
    "RelayConfig",
    "RetryConfig",
    "RuntimeConfig",
    "configure_logging",
    "get_default_config",
    "set_default_config",
]
