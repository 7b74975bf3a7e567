from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

from airline_intel.logging_config import configure_logging


def test_json_is_default(monkeypatch):
    monkeypatch.delenv("AIRLINE_INTEL_LOG_FORMAT", raising=False)
    configure_logging()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, jsonlogger.JsonFormatter)


def test_plain_format_from_env(monkeypatch):
    monkeypatch.setenv("AIRLINE_INTEL_LOG_FORMAT", "plain")
    configure_logging()

    formatter = logging.getLogger().handlers[0].formatter
    assert not isinstance(formatter, jsonlogger.JsonFormatter)


def test_force_format_wins(monkeypatch):
    monkeypatch.setenv("AIRLINE_INTEL_LOG_FORMAT", "plain")
    configure_logging(force_format="json")

    assert isinstance(logging.getLogger().handlers[0].formatter, jsonlogger.JsonFormatter)
