"""Environment parsing helpers.

Small helpers to consistently parse env vars with sane defaults.
"""
from __future__ import annotations

from typing import Iterable
import os


_TRUE = ("1", "true", "True", "TRUE", "YES", "yes", "on", "On")


def env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None or val.strip() == "":
        return bool(default)
    return val.strip() in _TRUE


def env_int(name: str, default: int, minimum: int | None = None) -> int:
    try:
        v = int(os.getenv(name, str(default)))
    except ValueError:
        v = int(default)
    if minimum is not None:
        v = max(minimum, v)
    return v


def env_str(name: str, default: str) -> str:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip()


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """Return the env value if it is one of ``choices`` (case-insensitive)."""
    allowed = {c.lower(): c for c in choices}
    val = env_str(name, default).lower()
    return allowed.get(val, default)
