"""Public exceptions for the Ivko SDK."""


class IvkoError(Exception):
    """Base exception for all Ivko SDK errors."""


class IvkoConfigError(IvkoError):
    """Configuration error (malformed base URL, invalid config).

    Raised at construction time; never delivered through a service callback.
    """


class ServiceError(IvkoError):
    """Error produced while classifying the outcome of a service call.

    Service errors are delivered to the caller's callback, not raised.
    """


class NetworkError(ServiceError):
    """Transport-level failure (DNS, connection, TLS, timeout)."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class InvalidResponseType(ServiceError):
    """Response metadata missing, or status code outside 200-299."""

    def __init__(self, status_code: int | None = None) -> None:
        if status_code is None:
            message = "Invalid response: no response metadata"
        else:
            message = f"Invalid response: HTTP {status_code}"
        super().__init__(message)
        self.status_code = status_code


class EmptyResponse(ServiceError):
    """Successful status code but no response body."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Empty response body (HTTP {status_code})")
        self.status_code = status_code


class UnexpectedResponse(ServiceError):
    """Body was not decodable, or decoded into the wrong shape.

    ``raw_text`` holds the body as text when it could not be decoded as JSON,
    so callers can log what the server actually returned.
    """

    def __init__(self, status_code: int, raw_text: str | None = None) -> None:
        super().__init__(f"Unexpected response (HTTP {status_code})")
        self.status_code = status_code
        self.raw_text = raw_text
