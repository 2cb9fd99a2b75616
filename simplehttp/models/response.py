"""Buffered, immutable HTTP response value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from simplehttp.models.headers import EMPTY_HEADERS, Headers


if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class HttpResponse:
    """A fully read HTTP response.

    Created once per HTTP call and never mutated. The body is held as text;
    there is no streaming access.
    """

    status_code: int
    status_message: str
    headers: Headers = field(default=EMPTY_HEADERS)
    content: str = ""
    url: str = ""

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> HttpResponse:
        """Buffer an ``httpx.Response`` into an immutable value."""
        try:
            url = str(response.url)
        except RuntimeError:
            # Responses built by hand have no request attached
            url = ""
        return cls(
            status_code=response.status_code,
            status_message=response.reason_phrase,
            headers=Headers.from_httpx(response.headers),
            content=response.text,
            url=url,
        )

    def __str__(self) -> str:
        return f"{self.status_code} ({self.status_message})"
