"""Core abstractions for simplehttp."""

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


__all__ = [
    "ConfigurationError",
    "HTTPClient",
    "HTTPConnectionError",
    "HTTPError",
    "HTTPTimeoutError",
    "HTTPXClient",
    "PaginationLimitError",
    "SequentialLinkIterator",
    "SimpleHTTPError",
    "TimingError",
    "follow_links",
    "sequential_link_iterator",
]
