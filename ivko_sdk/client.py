"""User-facing client for the Ivko coordinator API.

Example usage:
    from ivko_sdk import Details, IvkoClient, Promotions

    with IvkoClient.from_env() as client:

        def on_done(payload, error):
            if error is not None:
                print("failed:", error)
            else:
                print(payload["promotions"])

        client.call(Promotions(), on_done)

        result = client.fetch(Details(style_code="ABC123")).result()
        details = result.unwrap()
"""

import os
from concurrent.futures import Future

from ivko_sdk._internal.dispatch.client import DEFAULT_MAX_WORKERS, Dispatcher
from ivko_sdk._internal.dispatch.transport import HttpTransport, Transport
from ivko_sdk._internal.http import (
    DEFAULT_APP_BUILD,
    DEFAULT_APP_NAME,
    DEFAULT_TIMEOUT,
    build_user_agent,
    create_http_client,
)
from ivko_sdk._version import __version__
from ivko_sdk.endpoints import BASE_URL, Endpoint, build_request, validate_base_url
from ivko_sdk.exceptions import ServiceError
from ivko_sdk.models import JSON, ServiceCallback, ServiceResult

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


class IvkoClient:
    """Client that dispatches endpoint calls on a shared work queue.

    Construct one client at process start and pass it to whoever needs it.
    Each client owns one HTTP connection pool and one worker pool; both are
    released by ``close()`` or by leaving a ``with`` block.

    Use `IvkoClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        max_workers: int = DEFAULT_MAX_WORKERS,
        app_name: str = DEFAULT_APP_NAME,
        app_version: str = __version__,
        app_build: str = DEFAULT_APP_BUILD,
        debug: bool = False,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root. Validated here; a malformed URL is a programmer error.
            timeout_ms: Transport timeout in milliseconds.
            max_workers: Size of the worker pool.
            app_name: Application name reported in the User-Agent.
            app_version: Application version reported in the User-Agent.
            app_build: Application build reported in the User-Agent.
            debug: Enable debug logging to stderr.
            transport: Optional transport to use instead of the default httpx one.

        Raises:
            IvkoConfigError: If ``base_url`` is malformed.
        """
        validate_base_url(base_url)
        self._base_url = base_url
        self._timeout_ms = timeout_ms
        self._max_workers = max_workers
        self._debug = debug
        self._user_agent = build_user_agent(
            app_name=app_name,
            app_version=app_version,
            app_build=app_build,
        )
        if transport is None:
            transport = HttpTransport(
                create_http_client(timeout=timeout_ms / 1000, user_agent=self._user_agent)
            )
        self._transport = transport
        self._dispatcher = Dispatcher(transport, max_workers=max_workers, debug=debug)

    @classmethod
    def from_env(cls) -> "IvkoClient":
        """Create a client from environment variables.

        Optional environment variables:
            IVKO_DEBUG: Set to "1" to enable debug logging.
            IVKO_TIMEOUT_MS: Transport timeout in milliseconds.
            IVKO_MAX_WORKERS: Size of the worker pool.
            IVKO_APP_NAME: Application name for the User-Agent.
            IVKO_APP_VERSION: Application version for the User-Agent.
            IVKO_APP_BUILD: Application build for the User-Agent.

        Returns:
            A configured IvkoClient.

        Raises:
            ValueError: If a numeric variable is not a valid integer.
        """
        debug = os.environ.get("IVKO_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("IVKO_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        max_workers = int(os.environ.get("IVKO_MAX_WORKERS", str(DEFAULT_MAX_WORKERS)))

        return cls(
            timeout_ms=timeout_ms,
            max_workers=max_workers,
            app_name=os.environ.get("IVKO_APP_NAME", DEFAULT_APP_NAME),
            app_version=os.environ.get("IVKO_APP_VERSION", __version__),
            app_build=os.environ.get("IVKO_APP_BUILD", DEFAULT_APP_BUILD),
            debug=debug,
        )

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def pending(self) -> int:
        """Number of calls submitted but not yet completed."""
        return self._dispatcher.pending

    def call(self, endpoint: Endpoint, callback: ServiceCallback) -> None:
        """Call an endpoint asynchronously.

        Returns immediately. ``callback`` runs once on a worker thread with
        ``(payload, None)`` on success or ``(None, error)`` on failure.

        Args:
            endpoint: The logical endpoint to call.
            callback: Receives the decoded payload or a ServiceError.
        """
        request = build_request(endpoint, base_url=self._base_url)
        self._dispatcher.submit(request, endpoint, callback)

    def fetch(self, endpoint: Endpoint) -> "Future[ServiceResult]":
        """Call an endpoint and return a future of its ServiceResult.

        The future resolves to the same result a ``call`` callback would see.
        """
        request = build_request(endpoint, base_url=self._base_url)
        return self._dispatcher.submit(request, endpoint, _ignore_result)

    def close(self) -> None:
        """Wait for in-flight calls, then release the worker and connection pools."""
        self._dispatcher.shutdown(wait=True)
        self._transport.close()

    def __enter__(self) -> "IvkoClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _ignore_result(payload: JSON | None, error: ServiceError | None) -> None:
    pass


def get_client() -> IvkoClient:
    """Get a client configured from environment variables.

    Returns a new client on every call; callers share one by passing it around.

    Returns:
        A configured IvkoClient instance.
    """
    return IvkoClient.from_env()
