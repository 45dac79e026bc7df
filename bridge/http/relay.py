"""
HTTP Relay

Forwards a caller-built POST request to a remote endpoint and returns a
classified RelayOutcome. Every call produces exactly one outcome; transport
errors are turned into failures rather than raised.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Mapping, Optional, Union

from requests.structures import CaseInsensitiveDict

from bridge.config import RelayConfig, RuntimeConfig, get_default_config
from bridge.schemas.relay import (
    RelayFailure,
    RelayOutcome,
    RelayRequest,
    RelayResponse,
    RelaySuccess,
)

from .client import HttpClient, HttpError, HttpTimeoutError

logger = logging.getLogger(__name__)


def build_headers(
    caller_headers: Optional[Mapping[str, str]],
    *,
    content_type: str,
    user_agent: str,
) -> CaseInsensitiveDict:
    """
    Assemble outgoing headers in two phases.

    Caller headers are applied first; Content-Type and User-Agent are then
    written unconditionally, replacing any caller value regardless of case.
    """
    headers: CaseInsensitiveDict = CaseInsensitiveDict()
    for name, value in (caller_headers or {}).items():
        headers[name] = value

    headers["Content-Type"] = content_type
    headers["User-Agent"] = user_agent
    return headers


def classify_response(response: RelayResponse) -> RelayOutcome:
    """Map a fully received response to Success (2xx) or an HTTP failure."""
    if response.ok:
        return RelaySuccess(body=response.body)
    return RelayFailure.http_status(response.status_code, response.body)


class HttpRelay:
    """
    Outbound POST relay.

    Usage:
        relay = HttpRelay()
        outcome = relay.relay(
            "https://api.github.com/graphql",
            '{"query": "{ viewer { login } }"}',
            {"Authorization": "bearer ..."},
        )
        if outcome.ok:
            print(outcome.body)
    """

    def __init__(
        self,
        config: Optional[RelayConfig] = None,
        *,
        client: Optional[HttpClient] = None,
        proxy: Optional[str] = None,
    ) -> None:
        self.config = config or RelayConfig()
        self.client = client or HttpClient(timeout=self.config.timeout, proxy=proxy)

    @classmethod
    def from_config(cls, config: RuntimeConfig) -> "HttpRelay":
        """Create a relay from a RuntimeConfig."""
        return cls(config.relay, proxy=config.proxy)

    def relay(
        self,
        target_url: str,
        body: Union[str, bytes],
        headers: Optional[Mapping[str, str]] = None,
    ) -> RelayOutcome:
        """
        POST ``body`` to ``target_url`` and classify the result.

        Returns:
            RelaySuccess with the raw body on 2xx, otherwise a RelayFailure
            of kind timeout, transport or http_status.
        """
        request_headers = build_headers(
            headers,
            content_type=self.config.content_type,
            user_agent=self.config.user_agent,
        )
        logger.debug(f"Relaying POST to {target_url} with headers {sorted(request_headers.keys())}")

        try:
            response = self.client.post(
                target_url,
                headers=dict(request_headers),
                data=body,
                timeout=self.config.timeout,
            )
        except HttpTimeoutError:
            outcome = RelayFailure.timeout(self.config.timeout)
        except HttpError as e:
            outcome = RelayFailure.transport(str(e))
        else:
            outcome = classify_response(
                RelayResponse(status_code=response.status_code, body=response.text)
            )

        if isinstance(outcome, RelayFailure):
            logger.warning(f"Relay to {target_url} failed ({outcome.kind.value}): {outcome.message}")
        return outcome

    def relay_request(self, request: RelayRequest) -> RelayOutcome:
        """Relay a RelayRequest model."""
        return self.relay(request.target_url, request.body, request.headers)

    def relay_many(
        self,
        batch: Iterable[RelayRequest],
        *,
        max_workers: Optional[int] = None,
    ) -> list[RelayOutcome]:
        """
        Relay independent requests concurrently.

        Outcomes are returned in input order, one per request.
        """
        items = list(batch)
        if not items:
            return []
        with ThreadPoolExecutor(max_workers=max_workers or len(items)) as pool:
            return list(pool.map(self.relay_request, items))

    async def arelay(
        self,
        target_url: str,
        body: Union[str, bytes],
        headers: Optional[Mapping[str, str]] = None,
    ) -> RelayOutcome:
        """Awaitable relay; the blocking call runs in a worker thread."""
        return await asyncio.to_thread(self.relay, target_url, body, headers)


def relay(
    target_url: str,
    body: Union[str, bytes],
    headers: Optional[Mapping[str, str]] = None,
    *,
    config: Optional[RuntimeConfig] = None,
) -> RelayOutcome:
    """Relay one request using the given or default runtime configuration."""
    return HttpRelay.from_config(config or get_default_config()).relay(target_url, body, headers)
