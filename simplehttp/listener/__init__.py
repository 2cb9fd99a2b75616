"""Client decorators that observe calls without changing them."""

from simplehttp.listener.timed import (
    Clock,
    MonotonicClock,
    TimedHTTPClient,
    Timer,
    timed_http_client,
)


__all__ = [
    "Clock",
    "MonotonicClock",
    "TimedHTTPClient",
    "Timer",
    "timed_http_client",
]
