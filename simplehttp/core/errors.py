"""Core error types for the simplehttp client."""


class SimpleHTTPError(Exception):
    """Base exception for all simplehttp errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        """Initialize with a message and optional cause.

        Args:
            message: The error message
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.cause = cause
        if cause:
            self.__cause__ = cause


class HTTPError(SimpleHTTPError):
    """Base exception for transport failures raised by an HTTP client."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize HTTP error.

        Args:
            message: Error message
            status_code: HTTP status code (optional)
            cause: The underlying transport exception
        """
        super().__init__(message, cause)
        self.status_code = status_code


class HTTPTimeoutError(HTTPError):
    """Exception raised when HTTP request times out."""

    def __init__(
        self, message: str = "Request timed out", cause: Exception | None = None
    ) -> None:
        super().__init__(message, status_code=408, cause=cause)


class HTTPConnectionError(HTTPError):
    """Exception raised when HTTP connection fails."""

    def __init__(
        self, message: str = "Connection failed", cause: Exception | None = None
    ) -> None:
        super().__init__(message, status_code=503, cause=cause)


class ConfigurationError(SimpleHTTPError):
    """Raised when a client or decorator is set up with unusable configuration."""

    pass


class TimingError(SimpleHTTPError):
    """Raised when a clock reports an end instant earlier than the start."""

    def __init__(self, start: int, end: int) -> None:
        super().__init__(
            f"clock went backwards: stopped at {end}ms before start at {start}ms"
        )
        self.start = start
        self.end = end


class PaginationLimitError(SimpleHTTPError):
    """Raised when following next links would exceed an explicit hop limit."""

    def __init__(self, max_hops: int, url: str) -> None:
        """Initialize with the configured limit and the link that was refused.

        Args:
            max_hops: Maximum number of pages the iterator may fetch
            url: The next link that would have been requested
        """
        super().__init__(
            f"refusing to follow {url}: pagination limit of {max_hops} hops reached"
        )
        self.max_hops = max_hops
        self.url = url


__all__ = [
    "ConfigurationError",
    "HTTPConnectionError",
    "HTTPError",
    "HTTPTimeoutError",
    "PaginationLimitError",
    "SimpleHTTPError",
    "TimingError",
]
