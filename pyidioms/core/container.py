"""Generic single-value container."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Container(Generic[T]):
    """Holds exactly one value of type ``T``, fixed at construction.

    ``get()`` returns the very object passed in; there is no setter and
    assigning to ``value`` raises ``dataclasses.FrozenInstanceError``.
    """

    value: T

    def get(self) -> T:
        return self.value
