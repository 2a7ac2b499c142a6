"""Ivko SDK for Python.

Client-side dispatch layer for the Ivko coordinator API: endpoints are
translated into HTTP requests, executed on a shared work queue, and their
outcomes classified into a payload or a typed ServiceError.

Public API:
    IvkoClient - User-facing client
    Promotions, Seasons, Products, Details - Endpoints
    ServiceResult - Payload-or-error result

Internal (system-level, not for direct use):
    _internal.dispatch - Work queue, transport and response classification
"""

from ivko_sdk._version import __version__
from ivko_sdk.client import IvkoClient, get_client
from ivko_sdk.endpoints import BASE_URL, Details, Endpoint, Products, Promotions, Seasons
from ivko_sdk.exceptions import (
    EmptyResponse,
    InvalidResponseType,
    IvkoConfigError,
    IvkoError,
    NetworkError,
    ServiceError,
    UnexpectedResponse,
)
from ivko_sdk.models import JSON, ServiceCallback, ServiceResult

__all__ = [
    "__version__",
    "IvkoClient",
    "get_client",
    "BASE_URL",
    "Endpoint",
    "Promotions",
    "Seasons",
    "Products",
    "Details",
    "JSON",
    "ServiceCallback",
    "ServiceResult",
    "IvkoError",
    "IvkoConfigError",
    "ServiceError",
    "NetworkError",
    "InvalidResponseType",
    "EmptyResponse",
    "UnexpectedResponse",
]
