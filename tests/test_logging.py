from __future__ import annotations

import logging

import pytest

from pyidioms.telemetry import logging as pyidioms_logging
from pyidioms.telemetry.logging import get_logger


def test_plain_logger():
    log = get_logger("pyidioms.test")
    assert isinstance(log, logging.Logger)
    assert log.name == "pyidioms.test"


def test_context_prefix(caplog):
    log = get_logger("pyidioms.test.ctx", {"holder": "balance", "op": "write"})
    with caplog.at_level(logging.INFO, logger="pyidioms.test.ctx"):
        log.info("done")
    assert "[holder=balance op=write] done" in caplog.text


def test_rejected_write_logged_at_warning(holder, caplog):
    with caplog.at_level(logging.WARNING, logger="pyidioms.core.balance"):
        try:
            holder.write(-2)
        except ValueError:
            pass
    assert "rejected write to balance" in caplog.text


@pytest.mark.parametrize("env_value, expected", [("debug", logging.DEBUG), ("loud", logging.INFO)])
def test_root_level_follows_settings(monkeypatch, env_value, expected):
    calls = []
    monkeypatch.setattr(pyidioms_logging, "_CONFIGURED", False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setenv("PYIDIOMS_LOG_LEVEL", env_value)
    get_logger("pyidioms.test.level")
    assert calls == [{"level": expected, "format": pyidioms_logging.LOG_FORMAT}]
