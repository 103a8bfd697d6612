"""Tests for the logging setup in the entry point."""

from __future__ import annotations

import logging

import pytest

from kibitz import app


@pytest.fixture
def captured_config(monkeypatch: pytest.MonkeyPatch) -> dict:
    seen: dict = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    return seen


def test_default_level_is_warning(monkeypatch, captured_config) -> None:
    monkeypatch.delenv("KIBITZ_LOG_LEVEL", raising=False)
    app.configure_logging()
    assert captured_config["level"] == logging.WARNING


def test_level_from_environment(monkeypatch, captured_config) -> None:
    monkeypatch.setenv("KIBITZ_LOG_LEVEL", "debug")
    app.configure_logging()
    assert captured_config["level"] == logging.DEBUG


def test_unknown_level_falls_back(monkeypatch, captured_config) -> None:
    monkeypatch.setenv("KIBITZ_LOG_LEVEL", "chatty")
    app.configure_logging()
    assert captured_config["level"] == logging.WARNING
