"""Validated balance holders.

A holder stores one non-negative number behind three operations:

- ``read()``: current value
- ``write(value)``: guarded; a negative or non-numeric value raises
  :class:`InvalidArgument` and leaves the stored value untouched
- ``reset()``: sets the value to exactly ``0``

The ``balance`` property maps getter/setter/deleter onto those operations.
Concrete variants register under a ``kind`` tag so they can be rebuilt from
plain dicts (see ``create_holder``).
"""
from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar
import math

from ..config import load_settings
from ..telemetry.logging import get_logger
from ..telemetry.prom import Counter
from .errors import InvalidArgument, RegistryError, UnknownKind


REJECTED_WRITES = "pyidioms_balance_rejected_writes_total"

H = TypeVar("H", bound="BalanceHolder")

_HOLDERS: Dict[str, Type["BalanceHolder"]] = {}

_log = get_logger(__name__)


def register_holder(kind: str) -> Callable[[Type[H]], Type[H]]:
    """Class decorator registering a holder variant under ``kind``."""

    def deco(cls: Type[H]) -> Type[H]:
        existing = _HOLDERS.get(kind)
        if existing is not None and existing is not cls:
            raise RegistryError(f"holder kind {kind!r} already registered to {existing.__name__}")
        _HOLDERS[kind] = cls
        cls.kind = kind
        return cls

    return deco


def holder_class(kind: str) -> Type["BalanceHolder"]:
    try:
        return _HOLDERS[kind]
    except KeyError:
        raise UnknownKind(f"unknown holder kind {kind!r}; known: {sorted(_HOLDERS)}") from None


def holder_kinds() -> list[str]:
    return sorted(_HOLDERS)


def create_holder(kind: str, **kwargs: Any) -> "BalanceHolder":
    return holder_class(kind)(**kwargs)


@register_holder("balance")
class BalanceHolder:
    kind: str = "balance"

    def __init__(self, value: float = 0, *, validate: Optional[bool] = None) -> None:
        if validate is None:
            validate = load_settings().validate_initial
        if validate:
            value = self.validate_amount(value)
        self._value = value

    @staticmethod
    def validate_amount(value: Any) -> float:
        """Return ``value`` unchanged if it is a usable amount, else raise."""
        if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
            raise InvalidArgument(f"amount must be a real number, got {type(value).__name__}")
        if not (value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)):
            raise InvalidArgument(f"amount must be finite, got {value!r}")
        if value < 0:
            raise InvalidArgument(f"amount must be non-negative, got {value!r}")
        return value

    @classmethod
    def zero(cls: Type[H], **kwargs: Any) -> H:
        return cls(0, **kwargs)

    @classmethod
    def from_dict(cls: Type[H], data: Mapping[str, Any]) -> H:
        kind = data.get("kind", cls.kind)
        if kind != cls.kind:
            raise InvalidArgument(f"{cls.__name__} cannot load kind {kind!r}")
        fields = {k: v for k, v in data.items() if k not in ("kind", "schema_version")}
        return cls(**fields)

    def read(self) -> float:
        _log.debug("read %s -> %r", self.kind, self._value)
        return self._value

    def write(self, value: Any) -> None:
        try:
            value = self.validate_amount(value)
        except InvalidArgument as e:
            Counter(REJECTED_WRITES, "Writes rejected by balance validation").inc()
            _log.warning("rejected write to %s: %s", self.kind, e)
            raise
        self._value = value

    def reset(self) -> None:
        self._value = 0

    @property
    def balance(self) -> float:
        return self.read()

    @balance.setter
    def balance(self, value: Any) -> None:
        self.write(value)

    @balance.deleter
    def balance(self) -> None:
        self.reset()

    def to_dict(self) -> Dict[str, Any]:
        # kind must resolve back to this exact class
        if _HOLDERS.get(self.kind) is not type(self):
            raise RegistryError(f"{type(self).__name__} is not registered under kind {self.kind!r}")
        return {"kind": self.kind, "value": self._value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BalanceHolder):
            return NotImplemented
        return type(self) is type(other) and vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


@register_holder("bank_account")
class BankAccount(BalanceHolder):
    def __init__(self, value: float = 0, owner: str = "", *, validate: Optional[bool] = None) -> None:
        super().__init__(value, validate=validate)
        self.owner = owner

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["owner"] = self.owner
        return d

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, owner={self.owner!r})"
