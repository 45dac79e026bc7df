"""
Relay request, response and outcome schemas.

A RelayOutcome is the only artifact that crosses the bridge boundary.
Internally a failure keeps its kind (timeout, transport, http_status);
it is flattened to a plain message only by the boundary commands.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import BridgeError, ErrorCodes


DEFAULT_TIMEOUT_SECONDS = 30.0

RETRYABLE_STATUS_CODES = frozenset({502, 503, 504})


def timeout_message(seconds: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    """Fixed human-readable message for a timed out relay."""
    return f"Request timeout after {seconds:g} seconds"


class FailureKind(str, Enum):
    """Classification of a failed relay."""
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"


_FAILURE_CODES = {
    FailureKind.TIMEOUT: ErrorCodes.RELAY_TIMEOUT,
    FailureKind.TRANSPORT: ErrorCodes.RELAY_TRANSPORT_ERROR,
    FailureKind.HTTP_STATUS: ErrorCodes.RELAY_HTTP_STATUS,
}


class RelayRequest(BaseModel):
    """
    A caller-built request to forward.

    Built fresh for every call and owned by it; never persisted.
    """

    model_config = ConfigDict(extra="forbid")

    target_url: str = Field(
        ...,
        description="Endpoint to POST to; well-formedness is left to the transport",
        min_length=1,
    )
    body: Union[str, bytes] = Field(
        default="",
        description="Payload sent verbatim (str is encoded as UTF-8)",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Caller headers, applied before the mandatory defaults",
    )


class RelayResponse(BaseModel):
    """A fully received HTTP response."""

    model_config = ConfigDict(extra="forbid")

    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        """Check if the status is in the 2xx range."""
        return 200 <= self.status_code < 300


class RelaySuccess(BaseModel):
    """Remote endpoint answered with a 2xx status."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    outcome: Literal["success"] = "success"
    body: str

    @property
    def ok(self) -> bool:
        return True


class RelayFailure(BaseModel):
    """Timeout, transport failure, or non-2xx response."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    outcome: Literal["failure"] = "failure"
    kind: FailureKind
    message: str
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def retryable(self) -> bool:
        """Timeouts, transport failures and gateway errors are transient."""
        if self.kind in (FailureKind.TIMEOUT, FailureKind.TRANSPORT):
            return True
        return self.status_code in RETRYABLE_STATUS_CODES

    @classmethod
    def timeout(cls, seconds: float = DEFAULT_TIMEOUT_SECONDS) -> "RelayFailure":
        return cls(kind=FailureKind.TIMEOUT, message=timeout_message(seconds))

    @classmethod
    def transport(cls, message: str) -> "RelayFailure":
        return cls(kind=FailureKind.TRANSPORT, message=message)

    @classmethod
    def http_status(cls, status_code: int, body: str) -> "RelayFailure":
        return cls(
            kind=FailureKind.HTTP_STATUS,
            message=f"HTTP {status_code}: {body}",
            status_code=status_code,
        )

    def to_error_model(self) -> BridgeError:
        """Convert this failure to a structured BridgeError."""
        details = {"kind": self.kind.value}
        if self.status_code is not None:
            details["status_code"] = self.status_code
        return BridgeError(
            code=_FAILURE_CODES[self.kind],
            message=self.message,
            details=details,
            retryable=self.retryable,
        )


RelayOutcome = Annotated[
    Union[RelaySuccess, RelayFailure],
    Field(discriminator="outcome"),
]
