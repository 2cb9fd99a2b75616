"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from simplehttp.config.settings import Settings, get_settings
from simplehttp.core.errors import ConfigurationError


def test_defaults() -> None:
    settings = Settings()

    assert settings.http.timeout == 30.0
    assert settings.http.follow_redirects is True
    assert settings.logging.level == "INFO"
    assert settings.logging.timing_logger is None
    assert settings.pagination.max_hops is None
    assert settings.pagination.case_sensitive_headers is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIMPLEHTTP_HTTP__TIMEOUT", "5")
    monkeypatch.setenv("SIMPLEHTTP_PAGINATION__MAX_HOPS", "10")
    monkeypatch.setenv("SIMPLEHTTP_LOGGING__LEVEL", "debug")

    settings = Settings()

    assert settings.http.timeout == 5.0
    assert settings.pagination.max_hops == 10
    assert settings.logging.level == "DEBUG"


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(pagination={"max_hops": -1})
    with pytest.raises(ValidationError):
        Settings(logging={"level": "LOUD"})
    with pytest.raises(ValidationError):
        Settings(http={"timeout": 0})


def test_from_toml(tmp_path: Path) -> None:
    config = tmp_path / "simplehttp.toml"
    config.write_text(
        "[http]\n"
        "timeout = 12.5\n"
        'user_agent = "paging-bot/2"\n'
        "\n"
        "[pagination]\n"
        "max_hops = 3\n"
        "case_sensitive_headers = false\n"
    )

    settings = Settings.from_config(config)

    assert settings.http.timeout == 12.5
    assert settings.http.user_agent == "paging-bot/2"
    assert settings.pagination.max_hops == 3
    assert settings.pagination.case_sensitive_headers is False


def test_config_file_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config = tmp_path / "settings.toml"
    config.write_text('[logging]\ntiming_logger = "simplehttp.timing"\n')
    monkeypatch.setenv("SIMPLEHTTP_CONFIG_FILE", str(config))

    assert get_settings().logging.timing_logger == "simplehttp.timing"


def test_keyword_overrides_file(tmp_path: Path) -> None:
    config = tmp_path / "simplehttp.toml"
    config.write_text("[http]\ntimeout = 12.5\n")

    settings = Settings.from_config(config, http={"timeout": 1.0})

    assert settings.http.timeout == 1.0


def test_invalid_toml(tmp_path: Path) -> None:
    config = tmp_path / "broken.toml"
    config.write_text("[http\ntimeout = ")

    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        Settings.from_config(config)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read"):
        Settings.from_config(tmp_path / "absent.toml")


def test_unsupported_format(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Unsupported"):
        Settings.from_config(tmp_path / "settings.yaml")
