"""Thin HTTP client abstraction with ordered headers, call timing and
``Link`` header pagination."""

from simplehttp.core.errors import (
    ConfigurationError,
    HTTPConnectionError,
    HTTPError,
    HTTPTimeoutError,
    PaginationLimitError,
    SimpleHTTPError,
    TimingError,
)
from simplehttp.core.http import HTTPClient, HTTPXClient
from simplehttp.core.pagination import (
    SequentialLinkIterator,
    follow_links,
    sequential_link_iterator,
)
from simplehttp.listener.timed import TimedHTTPClient, timed_http_client
from simplehttp.models.headers import (
    EMPTY_HEADERS,
    Header,
    Headers,
    empty_headers,
    header,
    headers,
)
from simplehttp.models.response import HttpResponse
from simplehttp.utils.links import next_link, parse_link_header


__version__ = "0.1.0"

__all__ = [
    "EMPTY_HEADERS",
    "ConfigurationError",
    "HTTPClient",
    "HTTPConnectionError",
    "HTTPError",
    "HTTPTimeoutError",
    "HTTPXClient",
    "Header",
    "Headers",
    "HttpResponse",
    "PaginationLimitError",
    "SequentialLinkIterator",
    "SimpleHTTPError",
    "TimedHTTPClient",
    "TimingError",
    "__version__",
    "empty_headers",
    "follow_links",
    "header",
    "headers",
    "next_link",
    "parse_link_header",
    "sequential_link_iterator",
    "timed_http_client",
]
