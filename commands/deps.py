"""
Command Dependencies

Holds the collaborators used by the boundary commands: the relay and the
host-provided notification capability.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from bridge.config import RuntimeConfig, configure_logging, set_default_config
from bridge.http import HttpRelay
from bridge.notifications import NotificationCapability

logger = logging.getLogger(__name__)

_relay: Optional[HttpRelay] = None
_notifier: Optional[NotificationCapability] = None


def _load_runtime_config() -> RuntimeConfig:
    """Load RuntimeConfig from a config file, then overlay environment variables.

    Search order for config file:
      1. ./desk-bridge.yaml
      2. ~/.config/desk-bridge/config.yaml

    Environment variables ALWAYS override config file values.
    """
    search_paths = [
        Path.cwd() / "desk-bridge.yaml",
        Path.home() / ".config" / "desk-bridge" / "config.yaml",
    ]

    config: RuntimeConfig | None = None

    for path in search_paths:
        if path.exists():
            config = RuntimeConfig.from_yaml(path)
            logger.info(f"Loaded config from {path}")
            break

    if config is None:
        config = RuntimeConfig()

    return config.with_env_overrides()


def get_relay() -> HttpRelay:
    """Get the relay, building it from runtime config on first use."""
    global _relay
    if _relay is None:
        config = _load_runtime_config()
        set_default_config(config)
        configure_logging(config)
        _relay = HttpRelay.from_config(config)
    return _relay


def get_notifier() -> Optional[NotificationCapability]:
    """Get the host notification capability, if one was installed."""
    return _notifier


def configure(
    *,
    relay: Optional[HttpRelay] = None,
    notifier: Optional[NotificationCapability] = None,
) -> None:
    """Install collaborators. Arguments left as None keep their current value."""
    global _relay, _notifier
    if relay is not None:
        _relay = relay
    if notifier is not None:
        _notifier = notifier


def reset() -> None:
    """Forget installed collaborators."""
    global _relay, _notifier
    _relay = None
    _notifier = None
