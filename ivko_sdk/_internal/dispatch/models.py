"""Pydantic models for requests and raw outcomes flowing through the dispatcher."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# =============================================================================
# Request
# =============================================================================


class Request(BaseModel):
    """Transport-level request built from an endpoint.

    Fields:
        method: HTTP method
        url: Absolute URL, query already encoded
        headers: Per-request headers (common headers are set on the client)
        body: Optional body bytes (JSON for POST)
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    url: str
    headers: dict[str, str] = {}
    body: bytes | None = None

    @field_validator("url")
    @classmethod
    def url_absolute(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must be absolute (http or https)")
        return v


# =============================================================================
# Outcome
# =============================================================================


class Outcome(BaseModel):
    """Raw result of executing one Request.

    Either ``error`` is set (transport failure), or the response fields are.
    ``status_code`` may still be None when the transport returned no usable
    response metadata.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: Exception | None = None
    status_code: int | None = None
    headers: dict[str, str] = {}
    body: bytes | None = None
    ts_start: datetime | None = None
    ts_end: datetime | None = None

    @property
    def duration_ms(self) -> float | None:
        """Wall-clock duration of the call in milliseconds, if timed."""
        if self.ts_start is None or self.ts_end is None:
            return None
        return (self.ts_end - self.ts_start).total_seconds() * 1000
