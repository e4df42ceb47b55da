"""Scoped timing helpers."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from ..config import resolve_clock
from ..core.errors import StateError
from ..core.schemas import TimerRecord
from .logging import get_logger
from .prom import Histogram


_log = get_logger(__name__)


@dataclass
class Timer:
    """Context manager recording ``start``, ``end`` and ``duration`` of a block.

    ``end`` and ``duration`` are set on every exit path, including when the
    block raises; the exception is never suppressed. If ``histogram`` names a
    metric, the duration is also observed into that Prometheus histogram.
    """

    name: str = "block"
    clock: Optional[Callable[[], float]] = field(default=None, repr=False)
    histogram: Optional[str] = None
    start: float | None = field(default=None, init=False)
    end: float | None = field(default=None, init=False)
    duration: float | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.clock is None:
            self.clock = resolve_clock()

    @property
    def interval(self) -> float | None:
        return self.duration

    @property
    def elapsed(self) -> float | None:
        return self.duration

    def __enter__(self) -> "Timer":
        self.end = None
        self.duration = None
        self.start = self.clock()  # type: ignore[misc]
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:  # noqa: ANN001
        if self.start is None:
            raise StateError(f"timer {self.name!r} exited without being entered")
        end = self.clock()  # type: ignore[misc]
        self.end = end
        self.duration = end - self.start
        if exc_type is not None:
            _log.debug("%s raised %s after %.6fs", self.name, exc_type.__name__, self.duration)
        else:
            _log.debug("%s took %.6fs", self.name, self.duration)
        if self.histogram:
            Histogram(self.histogram, "Duration of timed blocks in seconds").observe(self.duration)
        return False

    def to_record(self) -> TimerRecord:
        if self.start is None or self.end is None or self.duration is None:
            raise StateError(f"timer {self.name!r} has not finished")
        return TimerRecord(name=self.name, start=self.start, end=self.end, duration=self.duration)


@contextmanager
def timed(
    name: str = "block",
    clock: Optional[Callable[[], float]] = None,
    histogram: Optional[str] = None,
) -> Iterator[Timer]:
    """Generator form of :class:`Timer`: ``with timed("load") as t: ...``."""
    with Timer(name=name, clock=clock, histogram=histogram) as t:
        yield t
