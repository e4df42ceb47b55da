from __future__ import annotations

import time

import pytest

from pyidioms.config import DEFAULT_SETTINGS, load_settings, resolve_clock
from pyidioms.core.errors import ConfigError


def test_defaults(settings, monkeypatch):
    for name in ("PYIDIOMS_LOG_LEVEL", "PYIDIOMS_CLOCK", "PYIDIOMS_VALIDATE_INITIAL", "PYIDIOMS_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == settings == DEFAULT_SETTINGS
    assert settings.clock == "perf_counter"
    assert settings.validate_initial is True


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("PYIDIOMS_LOG_LEVEL", "warning")
    monkeypatch.setenv("PYIDIOMS_CLOCK", "time")
    monkeypatch.setenv("PYIDIOMS_VALIDATE_INITIAL", "off")
    monkeypatch.setenv("PYIDIOMS_JSON_INDENT", "-4")
    s = load_settings()
    assert s.log_level == "WARNING"
    assert s.clock == "time"
    assert s.validate_initial is False
    assert s.json_indent == 0


def test_unparsable_values_fall_back(monkeypatch):
    monkeypatch.setenv("PYIDIOMS_CLOCK", "sundial")
    monkeypatch.setenv("PYIDIOMS_JSON_INDENT", "wide")
    s = load_settings()
    assert s.clock == "perf_counter"
    assert s.json_indent == 2


def test_resolve_clock():
    assert resolve_clock("perf_counter") is time.perf_counter
    assert resolve_clock("time") is time.time
    with pytest.raises(ConfigError):
        resolve_clock("sundial")
