from __future__ import annotations

import logging

import pytest
import structlog

from ringbuf.config import BufferConfig, configure_logging_from_env
from ringbuf.log import configure_logging


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RINGBUF_LOG_LEVEL", "RINGBUF_LOG_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_defaults() -> None:
    config = BufferConfig.from_env()

    assert config.log_level == "info"
    assert config.log_format == "json"
    config.validate()


def test_specific_level_wins_over_generic(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    assert BufferConfig.from_env().log_level == "error"

    monkeypatch.setenv("RINGBUF_LOG_LEVEL", "DEBUG")
    assert BufferConfig.from_env().log_level == "debug"


@pytest.mark.parametrize(
    "config",
    [BufferConfig(log_level="trace"), BufferConfig(log_format="xml")],
)
def test_validate_rejects_unknown_values(config: BufferConfig) -> None:
    with pytest.raises(ValueError):
        config.validate()


def test_configure_logging_from_env_applies_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RINGBUF_LOG_LEVEL", "warn")
    monkeypatch.setenv("RINGBUF_LOG_FORMAT", "console")

    config = configure_logging_from_env()

    assert config.log_format == "console"
    assert logging.getLogger().level == logging.WARNING
    assert structlog.is_configured()
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)


def test_configure_logging_json_renderer() -> None:
    configure_logging("debug")

    assert logging.getLogger().level == logging.DEBUG
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("loud")
