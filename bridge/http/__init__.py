"""
HTTP Module

Single-shot HTTP transport, the outbound relay and an optional retry layer.
"""

from .client import HttpClient, HttpError, HttpResponse, HttpTimeoutError
from .relay import HttpRelay, build_headers, classify_response, relay
from .retry import RetryingRelay, is_retryable_failure

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "HttpTimeoutError",
    "HttpRelay",
    "build_headers",
    "classify_response",
    "relay",
    "RetryingRelay",
    "is_retryable_failure",
]
