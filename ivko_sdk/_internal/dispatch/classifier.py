"""Classification of raw outcomes into payloads or typed service errors.

The expected payload shape of each endpoint lives in ``SHAPES``, keyed by the
endpoint's ``kind`` tag. A shape decoder returns the success payload, or None
when the decoded JSON does not have the required shape.
"""

import json
from collections.abc import Callable
from typing import Any

from ivko_sdk._internal.dispatch.models import Outcome
from ivko_sdk.exceptions import (
    EmptyResponse,
    InvalidResponseType,
    NetworkError,
    ServiceError,
    UnexpectedResponse,
)
from ivko_sdk.models import ServiceResult

ShapeDecoder = Callable[[Any], dict[str, Any] | None]


def decode_object(obj: Any) -> dict[str, Any] | None:
    """Accept a single JSON object as-is."""
    if isinstance(obj, dict):
        return obj
    return None


def wrap_object_list(key: str) -> ShapeDecoder:
    """Accept a JSON array of objects and wrap it under ``key``."""

    def decode(obj: Any) -> dict[str, Any] | None:
        if isinstance(obj, list) and all(isinstance(item, dict) for item in obj):
            return {key: obj}
        return None

    return decode


SHAPES: dict[str, ShapeDecoder] = {
    "promotions": wrap_object_list("promotions"),
    "seasons": decode_object,
    "products": decode_object,
    "details": decode_object,
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def decode_json(data: bytes) -> Any:
    """Decode bytes into a generic JSON tree.

    NaN, Infinity and -Infinity are not JSON and are rejected.

    Raises:
        ValueError: If the bytes are not valid JSON (UnicodeDecodeError included).
        RecursionError: If the document nests deeper than the decoder allows.
    """
    return json.loads(data, parse_constant=_reject_constant)


def _status_error(status_code: int) -> ServiceError:
    # All non-2xx codes currently map to the same error.
    return InvalidResponseType(status_code)


def _as_text(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def classify(kind: str, outcome: Outcome) -> ServiceResult:
    """Turn one Outcome into exactly one ServiceResult.

    Args:
        kind: The ``kind`` tag of the endpoint that produced the request.
        outcome: Raw transport result.

    Returns:
        A ServiceResult carrying either the payload or a ServiceError.
    """
    if outcome.error is not None:
        return ServiceResult(error=NetworkError(outcome.error))

    status_code = outcome.status_code
    if status_code is None:
        return ServiceResult(error=InvalidResponseType())

    if not 200 <= status_code <= 299:
        return ServiceResult(error=_status_error(status_code))

    if not outcome.body:
        return ServiceResult(error=EmptyResponse(status_code))

    try:
        obj = decode_json(outcome.body)
    except (ValueError, RecursionError):
        return ServiceResult(error=UnexpectedResponse(status_code, _as_text(outcome.body)))

    payload = SHAPES.get(kind, decode_object)(obj)
    if payload is None:
        return ServiceResult(error=UnexpectedResponse(status_code, None))

    return ServiceResult(payload=payload)
