"""Queued asynchronous dispatcher for Ivko service calls."""

import sys
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING

from ivko_sdk._internal.dispatch.classifier import classify
from ivko_sdk._internal.dispatch.models import Outcome, Request
from ivko_sdk._internal.dispatch.transport import Transport
from ivko_sdk.exceptions import IvkoError, NetworkError
from ivko_sdk.models import ServiceCallback, ServiceResult

if TYPE_CHECKING:
    from ivko_sdk.endpoints import EndpointBase

DEFAULT_MAX_WORKERS = 4


class Dispatcher:
    """Runs requests on a bounded worker pool and reports each result once.

    Every ``submit`` becomes one unit of work on the shared pool. When the
    transport call completes, the Outcome is classified and the callback is
    invoked exactly once with either a payload or a ServiceError. Completion
    order across submissions is not guaranteed.

    There is no deduplication, cancellation or retry.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            transport: Executes a Request and returns its Outcome.
            max_workers: Number of worker threads in the pool.
            debug: Enable debug logging to stderr.
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._transport = transport
        self._debug = debug
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="ivko-dispatch",
        )
        self._lock = threading.Lock()
        self._in_flight: set[Future[ServiceResult]] = set()
        self._closed = False

    @property
    def pending(self) -> int:
        """Number of submitted calls that have not completed yet."""
        with self._lock:
            return len(self._in_flight)

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[ivko-sdk] {message}", file=sys.stderr)

    def submit(
        self,
        request: Request,
        endpoint: "EndpointBase",
        callback: ServiceCallback,
    ) -> "Future[ServiceResult]":
        """Enqueue a request and return immediately.

        Args:
            request: The built request to execute.
            endpoint: Endpoint the request was built from; selects the payload shape.
            callback: Called once with ``(payload, None)`` or ``(None, error)``.

        Returns:
            Future resolving to the same ServiceResult handed to the callback.

        Raises:
            IvkoError: If the dispatcher has been shut down.
        """
        with self._lock:
            if self._closed:
                raise IvkoError("Dispatcher is shut down")
            future = self._executor.submit(self._run, request, endpoint, callback)
            self._in_flight.add(future)
        future.add_done_callback(self._discard)
        self._log_debug(f"Queued {request.method} {request.url}")
        return future

    def _discard(self, future: "Future[ServiceResult]") -> None:
        with self._lock:
            self._in_flight.discard(future)

    def _run(
        self,
        request: Request,
        endpoint: "EndpointBase",
        callback: ServiceCallback,
    ) -> ServiceResult:
        try:
            outcome = self._transport.execute(request)
            self._log_duration(endpoint, outcome)
            result = classify(endpoint.kind, outcome)
        except Exception as e:
            self._log_debug(f"{endpoint.kind} transport raised: {e!r}")
            result = ServiceResult(error=NetworkError(e))

        if result.error is not None:
            self._log_debug(f"{endpoint.kind} failed: {result.error}")

        try:
            callback(result.payload, result.error)
        except Exception as e:
            self._log_debug(f"Callback for {endpoint.kind} raised: {e!r}")
        return result

    def _log_duration(self, endpoint: "EndpointBase", outcome: Outcome) -> None:
        duration_ms = outcome.duration_ms
        if duration_ms is not None:
            self._log_debug(f"{endpoint.kind} took {duration_ms:.1f} ms")

    def shutdown(self, *, wait: bool = True) -> None:
        """Stop accepting work; optionally wait for in-flight calls to finish."""
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=wait)
