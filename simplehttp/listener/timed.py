"""Timing decorator for :class:`~simplehttp.core.http.HTTPClient`.

``TimedHTTPClient`` implements the client interface by forwarding every
operation to a delegate, timing it with an injected clock and logging one
line when the call completes, whether it returned or raised::

    GET https://api.example.com/items was 200 (OK), took 42ms
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol

from structlog.stdlib import BoundLogger

from simplehttp.core.errors import ConfigurationError, TimingError
from simplehttp.core.http import HTTPClient
from simplehttp.core.logging import get_logger
from simplehttp.models.headers import Headers
from simplehttp.models.response import HttpResponse


class Clock(Protocol):
    """Source of the current instant in milliseconds."""

    def millis(self) -> int: ...


class MonotonicClock:
    """Clock backed by :func:`time.monotonic_ns`."""

    def millis(self) -> int:
        return time.monotonic_ns() // 1_000_000


class Timer:
    """Stop watch measuring elapsed milliseconds on a :class:`Clock`."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._start = 0

    def start(self) -> Timer:
        self._start = self._clock.millis()
        return self

    def elapsed_ms(self) -> int:
        now = self._clock.millis()
        if now < self._start:
            raise TimingError(self._start, now)
        return now - self._start


def _describe(result: HttpResponse | None) -> str:
    if isinstance(result, HttpResponse):
        return f"{result.status_code} ({result.status_message})"
    return ""


def _verify(logger_name: str | None) -> None:
    if not logger_name or logger_name == "root":
        raise ConfigurationError(
            "please choose a named logger for timed HTTP calls and make sure "
            "it is configured to emit INFO records"
        )


class TimedHTTPClient(HTTPClient):
    """HTTP client that times and logs every call made through a delegate.

    Raises:
        ConfigurationError: If ``logger_name`` is missing, empty or ``"root"``
    """

    def __init__(
        self,
        delegate: HTTPClient,
        clock: Clock,
        logger_name: str | None,
        logger: BoundLogger | None = None,
    ):
        _verify(logger_name)
        self._delegate = delegate
        self._clock = clock
        self._logger = logger if logger is not None else get_logger(logger_name)

    @property
    def delegate(self) -> HTTPClient:
        return self._delegate

    def _timed(
        self, operation: str, url: str, call: Callable[[], HttpResponse]
    ) -> HttpResponse:
        timer = Timer(self._clock).start()
        result: HttpResponse | None = None
        try:
            result = call()
            return result
        finally:
            self._log(operation, url, timer, result)

    def _log(
        self, operation: str, url: str, timer: Timer, result: HttpResponse | None
    ) -> None:
        method = operation.upper()
        elapsed = timer.elapsed_ms()
        self._logger.info(
            f"{method} {url} was {_describe(result)}, took {elapsed}ms",
            method=method,
            url=url,
            status_code=result.status_code if result is not None else None,
            status_message=result.status_message if result is not None else None,
            duration_ms=elapsed,
        )

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Headers | None = None,
        content: str | None = None,
    ) -> HttpResponse:
        return self._timed(
            method,
            url,
            lambda: self._delegate.request(
                method, url, headers=headers, content=content
            ),
        )

    def get(self, url: str, headers: Headers | None = None) -> HttpResponse:
        return self._timed("get", url, lambda: self._delegate.get(url, headers))

    def head(self, url: str, headers: Headers | None = None) -> HttpResponse:
        return self._timed("head", url, lambda: self._delegate.head(url, headers))

    def delete(self, url: str, headers: Headers | None = None) -> HttpResponse:
        return self._timed("delete", url, lambda: self._delegate.delete(url, headers))

    def options(self, url: str, headers: Headers | None = None) -> HttpResponse:
        return self._timed(
            "options", url, lambda: self._delegate.options(url, headers)
        )

    def post(
        self, url: str, content: str = "", headers: Headers | None = None
    ) -> HttpResponse:
        return self._timed(
            "post", url, lambda: self._delegate.post(url, content, headers)
        )

    def put(
        self, url: str, content: str = "", headers: Headers | None = None
    ) -> HttpResponse:
        return self._timed(
            "put", url, lambda: self._delegate.put(url, content, headers)
        )

    def patch(
        self, url: str, content: str = "", headers: Headers | None = None
    ) -> HttpResponse:
        return self._timed(
            "patch", url, lambda: self._delegate.patch(url, content, headers)
        )

    def close(self) -> None:
        self._delegate.close()


def timed_http_client(
    delegate: HTTPClient,
    clock: Clock | None = None,
    logger_name: str | None = None,
) -> TimedHTTPClient:
    """Wrap ``delegate`` so every call is timed and logged.

    Args:
        delegate: The client doing the actual work
        clock: Clock used for timing; defaults to :class:`MonotonicClock`
        logger_name: Name of the logger receiving one INFO line per call

    Raises:
        ConfigurationError: If no usable logger name is given
    """
    return TimedHTTPClient(delegate, clock or MonotonicClock(), logger_name)


__all__ = [
    "Clock",
    "MonotonicClock",
    "TimedHTTPClient",
    "Timer",
    "timed_http_client",
]
