"""Tests for HTTP client factory functions."""

import json
import logging
from collections.abc import Generator
from unittest.mock import Mock, call

import pytest
import structlog

from simplehttp.config.settings import Settings
from simplehttp.core.http import HTTPXClient
from simplehttp.core.logging import get_logger
from simplehttp.listener.timed import MonotonicClock, TimedHTTPClient
from simplehttp.models.headers import empty_headers, header, headers
from simplehttp.models.response import HttpResponse
from simplehttp.utils.http_factory import configure_logging, create_client, paginate


class TestCreateClient:
    """Test building clients from settings."""

    def test_plain_client_from_settings(self) -> None:
        settings = Settings(
            http={"timeout": 3.0, "follow_redirects": False, "user_agent": "ua/1"}
        )

        client = create_client(settings)

        assert isinstance(client, HTTPXClient)
        assert client.timeout == 3.0
        assert client.follow_redirects is False
        assert client.user_agent == "ua/1"

    def test_timed_when_logger_name_given(self) -> None:
        clock = MonotonicClock()

        client = create_client(
            Settings(), logger_name="simplehttp.calls", clock=clock
        )

        assert isinstance(client, TimedHTTPClient)
        assert isinstance(client.delegate, HTTPXClient)

    def test_timed_from_logging_settings(self) -> None:
        settings = Settings(logging={"timing_logger": "simplehttp.calls"})

        assert isinstance(create_client(settings), TimedHTTPClient)

    def test_uses_cached_settings_by_default(self) -> None:
        assert isinstance(create_client(), HTTPXClient)


class TestPaginate:
    """Test pagination settings are applied to the iterator."""

    def _looping_client(self) -> Mock:
        client = Mock()
        client.get.return_value = HttpResponse(
            200,
            "OK",
            headers(header("Link", '<http://example.com/again>; rel="next"')),
        )
        return client

    def test_applies_max_hops_from_settings(self) -> None:
        client = self._looping_client()
        settings = Settings(pagination={"max_hops": 2})

        pages = paginate(client, "http://example.com/start", settings)
        for _ in range(3):
            next(pages)

        assert pages.has_next() is True
        assert client.get.call_args_list == [
            call("http://example.com/start"),
            call("http://example.com/again"),
            call("http://example.com/again"),
        ]

    def test_keyword_overrides_settings(self) -> None:
        client = Mock()
        client.get.side_effect = [
            HttpResponse(
                200,
                "OK",
                headers(header("link", '<http://example.com/2>; rel="next"')),
            ),
            HttpResponse(200, "OK", empty_headers(), content="last"),
        ]
        settings = Settings(pagination={"case_sensitive_headers": True})

        pages = paginate(
            client, "http://example.com/1", settings, case_sensitive=False
        )

        assert [page.content for page in pages] == ["", "last"]


class TestConfigureLogging:
    """Test the logging settings drive the log handler."""

    @pytest.fixture(autouse=True)
    def restore_logging(self) -> Generator[None, None, None]:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        named = {
            name: logging.getLogger(name).level
            for name in ["simplehttp", "httpx", "httpcore", "httpcore.http11"]
        }
        yield
        root.handlers = handlers
        root.setLevel(level)
        for name, named_level in named.items():
            logging.getLogger(name).setLevel(named_level)
        structlog.reset_defaults()

    def test_applies_level_from_settings(self) -> None:
        configure_logging(Settings(logging={"level": "error"}))

        assert logging.getLogger().level == logging.ERROR
        assert logging.getLogger("simplehttp").level == logging.ERROR
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_applies_json_logs_from_settings(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(Settings(logging={"json_logs": True, "level": "DEBUG"}))

        get_logger("simplehttp.test").debug("page_fetched", page=3)

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "page_fetched"
        assert record["page"] == 3
        assert record["level"] == "debug"

    def test_uses_cached_settings_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SIMPLEHTTP_LOGGING__LEVEL", "critical")

        configure_logging()

        assert logging.getLogger("simplehttp").level == logging.CRITICAL
