"""Shared test fixtures and configuration for simplehttp tests.

Fixtures here build real value objects and mock only the HTTP client
capability or the transport underneath it.
"""

from collections.abc import Callable, Generator
from unittest.mock import Mock

import pytest

from simplehttp.config.settings import get_settings
from simplehttp.core.http import HTTPClient
from simplehttp.models.headers import Headers, empty_headers, header, headers
from simplehttp.models.response import HttpResponse


class FakeClock:
    """Clock returning a scripted sequence of millisecond instants."""

    def __init__(self, *instants: int) -> None:
        self._instants = list(instants)
        self.calls = 0

    def millis(self) -> int:
        self.calls += 1
        return self._instants.pop(0)


def link_to(url: str, rel: str = "next") -> Headers:
    return headers(header("Link", f'<{url}>; rel="{rel}"'))


@pytest.fixture
def fake_clock() -> Callable[..., FakeClock]:
    """Factory for clocks yielding the given instants in order."""
    return FakeClock


@pytest.fixture
def http_client() -> Mock:
    """HTTP client capability double; configure ``get.side_effect`` per test."""
    return Mock(spec=HTTPClient)


@pytest.fixture
def paged_responses() -> tuple[HttpResponse, HttpResponse, HttpResponse]:
    """Three pages chained by next links; the last page has no Link header."""
    initial = HttpResponse(
        200, "OK", link_to("http://example.com/first"), content="0"
    )
    second = HttpResponse(
        201, "OK", link_to("http://example.com/second"), content="1"
    )
    final = HttpResponse(202, "OK", empty_headers(), content="2")
    return initial, second, final


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Pytest configuration
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark tests by directory."""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
