"""HTTP transport that turns a Request into exactly one Outcome."""

from datetime import UTC, datetime
from typing import Protocol

import httpx

from ivko_sdk._internal.dispatch.models import Outcome, Request


class Transport(Protocol):
    """Anything that can execute a Request into exactly one Outcome."""

    def execute(self, request: Request) -> Outcome: ...

    def close(self) -> None: ...


class HttpTransport:
    """Executes requests on a shared httpx.Client.

    ``execute`` never raises for transport failures: any ``httpx.HTTPError``
    is captured on the returned Outcome instead.
    """

    def __init__(self, http_client: httpx.Client) -> None:
        self._http_client = http_client

    def execute(self, request: Request) -> Outcome:
        ts_start = datetime.now(UTC)
        try:
            response = self._http_client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.HTTPError as e:
            return Outcome(error=e, ts_start=ts_start, ts_end=datetime.now(UTC))

        return Outcome(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
            ts_start=ts_start,
            ts_end=datetime.now(UTC),
        )

    def close(self) -> None:
        self._http_client.close()
