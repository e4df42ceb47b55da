"""Telemetry subpackage (lightweight).

Exposes the scoped timer and Prometheus wrappers.
"""

from .metrics import Timer, timed
from .prom import Counter, Histogram

__all__ = [
    "Timer",
    "timed",
    "Counter",
    "Histogram",
]
