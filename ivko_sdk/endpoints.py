"""Logical API endpoints and their translation into transport requests.

Each endpoint is a frozen model tagged by ``kind``. The variant alone decides
the HTTP method, path segment, parameters and headers, so building a request
is pure: the same endpoint always yields an identical Request.

Example:
    from ivko_sdk.endpoints import Details, build_request

    request = build_request(Details(style_code="ABC123"))
    request.url  # "https://t1.aplus.rs/coordinator/api/details?style=ABC123"
"""

import json
from typing import Annotated, Any, ClassVar, Literal

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ivko_sdk._internal.dispatch.models import HttpMethod, Request
from ivko_sdk.exceptions import IvkoConfigError

BASE_URL = "https://t1.aplus.rs/coordinator/api"

# =============================================================================
# Endpoint variants
# =============================================================================


class EndpointBase(BaseModel):
    """Shared descriptor behaviour for all endpoint variants."""

    model_config = ConfigDict(frozen=True)

    kind: str
    method: ClassVar[HttpMethod] = "GET"
    path_segment: ClassVar[str]

    @property
    def params(self) -> dict[str, Any]:
        return {}

    @property
    def headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}


class Promotions(EndpointBase):
    """Promotional slides."""

    kind: Literal["promotions"] = "promotions"
    path_segment: ClassVar[str] = "slides.json"


class Seasons(EndpointBase):
    """Season catalogue."""

    kind: Literal["seasons"] = "seasons"
    path_segment: ClassVar[str] = "seasons.json"


class Products(EndpointBase):
    """Product catalogue."""

    kind: Literal["products"] = "products"
    path_segment: ClassVar[str] = "products.json"


class Details(EndpointBase):
    """Details for a single product style."""

    kind: Literal["details"] = "details"
    path_segment: ClassVar[str] = "details"

    style_code: str

    @property
    def params(self) -> dict[str, Any]:
        return {"style": self.style_code}


Endpoint = Annotated[
    Promotions | Seasons | Products | Details,
    Field(discriminator="kind"),
]

# =============================================================================
# Request building
# =============================================================================


def validate_base_url(base_url: str) -> httpx.URL:
    """Parse and check a base URL.

    Raises:
        IvkoConfigError: If the URL cannot be parsed, is not absolute http(s),
            or carries a query or fragment.
    """
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise IvkoConfigError(f"Invalid base URL {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise IvkoConfigError(f"Invalid base URL {base_url!r}: must be absolute http(s)")
    # Path segments are appended to the end of the URL string.
    text = str(url)
    if "?" in text or "#" in text:
        raise IvkoConfigError(f"Invalid base URL {base_url!r}: must not have a query or fragment")
    return url


def encode_query(params: dict[str, Any]) -> str:
    """Encode params as ``key=value`` pairs joined by ``&``.

    Values are percent-encoded. An empty mapping encodes to an empty string.
    """
    if not params:
        return ""
    return str(httpx.QueryParams(params))


def encode_body(params: dict[str, Any]) -> bytes:
    """Serialize params as a compact JSON object."""
    return json.dumps(params, separators=(",", ":")).encode("utf-8")


def build_request(endpoint: EndpointBase, *, base_url: str = BASE_URL) -> Request:
    """Translate an endpoint into a fully formed Request.

    Args:
        endpoint: The logical endpoint to call.
        base_url: API root the endpoint's path segment is appended to.

    Returns:
        Immutable Request with method, absolute URL, headers and optional body.

    Raises:
        IvkoConfigError: If ``base_url`` is malformed.
    """
    root = validate_base_url(base_url)
    url = f"{str(root).rstrip('/')}/{endpoint.path_segment}"

    query = encode_query(endpoint.params) if endpoint.method == "GET" else ""
    if query:
        url = f"{url}?{query}"

    body = encode_body(endpoint.params) if endpoint.method == "POST" else None

    return Request(
        method=endpoint.method,
        url=url,
        headers=dict(endpoint.headers),
        body=body,
    )
