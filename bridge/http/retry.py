"""
Caller-side retry layered over HttpRelay.

The relay itself never retries. Hosts that want transient failures retried
wrap it in a RetryingRelay.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Mapping, Optional, Union

from bridge.config import RetryConfig
from bridge.schemas.relay import RelayFailure, RelayOutcome

from .relay import HttpRelay

logger = logging.getLogger(__name__)


def is_retryable_failure(outcome: RelayOutcome) -> bool:
    """Timeouts, transport failures and gateway errors are worth retrying."""
    return isinstance(outcome, RelayFailure) and outcome.retryable


class RetryingRelay:
    """
    Retry wrapper with capped exponential backoff and jitter.

    Usage:
        relay = RetryingRelay(HttpRelay(), max_retries=3)
        outcome = relay.relay(url, body, headers)
    """

    def __init__(
        self,
        relay: HttpRelay,
        *,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        max_delay: float = 5.0,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._relay = relay
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.max_delay = max_delay
        self._sleep = sleep
        self._rng = rng or random.Random()

    @classmethod
    def from_config(cls, relay: HttpRelay, config: RetryConfig, **kwargs) -> "RetryingRelay":
        return cls(
            relay,
            max_retries=config.max_retries,
            retry_delay=config.retry_delay,
            max_delay=config.max_delay,
            **kwargs,
        )

    def backoff(self, attempt: int) -> float:
        """Delay before retry number ``attempt`` (1-based)."""
        base = min(self.retry_delay * (2 ** (attempt - 1)), self.max_delay)
        return self._rng.uniform(base / 2, base)

    def relay(
        self,
        target_url: str,
        body: Union[str, bytes],
        headers: Optional[Mapping[str, str]] = None,
    ) -> RelayOutcome:
        outcome = self._relay.relay(target_url, body, headers)
        attempt = 0
        while attempt < self.max_retries and is_retryable_failure(outcome):
            attempt += 1
            delay = self.backoff(attempt)
            logger.info(
                f"Retrying relay to {target_url} in {delay:.2f}s "
                f"(attempt {attempt}/{self.max_retries}): {outcome.message[:100]}"
            )
            self._sleep(delay)
            outcome = self._relay.relay(target_url, body, headers)
        return outcome
