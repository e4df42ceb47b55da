"""Configuration helpers for pyidioms.

Settings are read from ``PYIDIOMS_*`` environment variables; anything missing
or unparsable falls back to the defaults below.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict
import time

from .core.errors import ConfigError
from .utils.env import env_bool, env_choice, env_int


CLOCKS: Dict[str, Callable[[], float]] = {
    "perf_counter": time.perf_counter,
    "monotonic": time.monotonic,
    "time": time.time,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(slots=True)
class Settings:
    log_level: str = "INFO"
    clock: str = "perf_counter"
    validate_initial: bool = True
    json_indent: int = 2


DEFAULT_SETTINGS = Settings()


def load_settings() -> Settings:
    return Settings(
        log_level=env_choice("PYIDIOMS_LOG_LEVEL", LOG_LEVELS, DEFAULT_SETTINGS.log_level),
        clock=env_choice("PYIDIOMS_CLOCK", CLOCKS, DEFAULT_SETTINGS.clock),
        validate_initial=env_bool("PYIDIOMS_VALIDATE_INITIAL", DEFAULT_SETTINGS.validate_initial),
        json_indent=env_int("PYIDIOMS_JSON_INDENT", DEFAULT_SETTINGS.json_indent, minimum=0),
    )


def resolve_clock(name: str | None = None) -> Callable[[], float]:
    key = name if name is not None else load_settings().clock
    try:
        return CLOCKS[key]
    except KeyError:
        raise ConfigError(f"unknown clock {key!r}; expected one of {sorted(CLOCKS)}") from None
