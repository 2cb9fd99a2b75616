"""HTTP client capability and its httpx-backed implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import TYPE_CHECKING

from simplehttp.core.errors import HTTPConnectionError, HTTPError, HTTPTimeoutError
from simplehttp.core.logging import get_logger
from simplehttp.models.headers import Headers
from simplehttp.models.response import HttpResponse


if TYPE_CHECKING:
    import httpx


logger = get_logger(__name__)


class HTTPClient(ABC):
    """Abstract synchronous HTTP client.

    Implementations provide ``request``; the verb helpers are built on top of
    it. Every call blocks until the response is fully read.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Headers | None = None,
        content: str | None = None,
    ) -> HttpResponse:
        """Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Target URL
            headers: Request headers (optional)
            content: Request body as text (optional)

        Returns:
            The buffered response

        Raises:
            HTTPError: If the request could not be completed
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close any resources held by the HTTP client."""
        pass

    def get(self, url: str, headers: Headers | None = None) -> HttpResponse:
        return self.request("GET", url, headers=headers)

    def head(self, url: str, headers: Headers | None = None) -> HttpResponse:
        return self.request("HEAD", url, headers=headers)

    def delete(self, url: str, headers: Headers | None = None) -> HttpResponse:
        return self.request("DELETE", url, headers=headers)

    def options(self, url: str, headers: Headers | None = None) -> HttpResponse:
        return self.request("OPTIONS", url, headers=headers)

    def post(
        self, url: str, content: str = "", headers: Headers | None = None
    ) -> HttpResponse:
        return self.request("POST", url, headers=headers, content=content)

    def put(
        self, url: str, content: str = "", headers: Headers | None = None
    ) -> HttpResponse:
        return self.request("PUT", url, headers=headers, content=content)

    def patch(
        self, url: str, content: str = "", headers: Headers | None = None
    ) -> HttpResponse:
        return self.request("PATCH", url, headers=headers, content=content)

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class HTTPXClient(HTTPClient):
    """HTTPX-based HTTP client implementation."""

    def __init__(
        self,
        timeout: float = 30.0,
        verify: bool | str = True,
        follow_redirects: bool = True,
        user_agent: str | None = None,
    ) -> None:
        """Initialize HTTPX client.

        Args:
            timeout: Request timeout in seconds
            verify: SSL verification (True/False or path to CA bundle)
            follow_redirects: Whether redirects are followed by the transport
            user_agent: User-Agent sent with every request (optional)
        """
        self.timeout = timeout
        self.verify = verify
        self.follow_redirects = follow_redirects
        self.user_agent = user_agent
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTPX client."""
        if self._client is None:
            import httpx

            default_headers = (
                {"User-Agent": self.user_agent} if self.user_agent else None
            )
            self._client = httpx.Client(
                timeout=self.timeout,
                verify=self.verify,
                follow_redirects=self.follow_redirects,
                headers=default_headers,
            )
        return self._client

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Headers | None = None,
        content: str | None = None,
    ) -> HttpResponse:
        """Make an HTTP request using HTTPX.

        Non-2xx responses are returned as they are; only transport failures
        raise.

        Raises:
            HTTPTimeoutError: If the request times out
            HTTPConnectionError: If the connection cannot be established
            HTTPError: For any other transport failure
        """
        import httpx

        client = self._get_client()
        try:
            response = client.request(
                method=method,
                url=url,
                headers=headers.items() if headers else None,
                content=content,
            )
        except httpx.TimeoutException as e:
            raise HTTPTimeoutError(f"Request timed out: {e}", cause=e) from e
        except httpx.ConnectError as e:
            raise HTTPConnectionError(f"Connection failed: {e}", cause=e) from e
        except httpx.HTTPError as e:
            raise HTTPError(f"HTTP request failed: {e}", cause=e) from e

        logger.debug(
            "http_response_received",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return HttpResponse.from_httpx(response)

    def close(self) -> None:
        """Close the HTTPX client."""
        if self._client is not None:
            self._client.close()
            self._client = None
