"""Tests for logging configuration driven by settings."""

from __future__ import annotations

import logging

import pytest
import structlog

from skilldeps.config import Settings
from skilldeps.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def _renderer() -> object:
    (handler,) = logging.getLogger().handlers
    return handler.formatter.processors[-1]


def test_level_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    configure_logging(Settings())
    assert logging.getLogger().level == logging.WARNING


def test_verbose_forces_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    configure_logging(Settings(), verbose=True)
    assert logging.getLogger().level == logging.DEBUG


def test_console_renderer_by_default() -> None:
    configure_logging(Settings())
    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


def test_json_renderer_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_logging(Settings())
    assert isinstance(_renderer(), structlog.processors.JSONRenderer)


def test_unknown_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    configure_logging(Settings())
    assert logging.getLogger().level == logging.INFO
