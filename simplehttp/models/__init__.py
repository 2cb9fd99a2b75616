"""Value types shared across simplehttp."""

from simplehttp.models.headers import (
    EMPTY_HEADERS,
    Header,
    Headers,
    empty_headers,
    header,
    headers,
)
from simplehttp.models.response import HttpResponse


__all__ = [
    "EMPTY_HEADERS",
    "Header",
    "Headers",
    "HttpResponse",
    "empty_headers",
    "header",
    "headers",
]
