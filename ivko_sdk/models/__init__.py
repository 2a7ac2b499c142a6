"""Public result models for the Ivko SDK."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from ivko_sdk.exceptions import ServiceError

JSON = dict[str, Any]

ServiceCallback = Callable[[JSON | None, ServiceError | None], None]


class ServiceResult(BaseModel):
    """Terminal result of one service call.

    Exactly one of ``payload`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    payload: JSON | None = None
    error: ServiceError | None = None

    @model_validator(mode="after")
    def exactly_one(self) -> "ServiceResult":
        if (self.payload is None) == (self.error is None):
            raise ValueError("exactly one of payload and error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> JSON:
        """Return the payload, or raise the service error."""
        if self.error is not None:
            raise self.error
        return self.payload  # type: ignore[return-value]


__all__ = ["JSON", "ServiceCallback", "ServiceResult"]
