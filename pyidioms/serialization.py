"""JSON serialization helpers.

``JSONEncoder`` knows about the types this package (and typical callers)
hand it: dataclasses, pydantic models, numpy scalars and arrays, Decimal,
datetime/date, Path, sets, and anything with a ``to_dict()`` method.
"""
from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional
import json
import os

import numpy as np
from pydantic import BaseModel, ValidationError

from .config import load_settings
from .core.balance import BalanceHolder, holder_class
from .core.errors import InvalidArgument, RegistryError, SerializationError, UnknownKind
from .core.schemas import BalanceSnapshot


class JSONEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:  # noqa: ANN401
        if isinstance(o, BaseModel):
            return o.model_dump(mode="json")
        if is_dataclass(o) and not isinstance(o, type):
            return asdict(o)
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, np.generic):
            return o.item()
        if isinstance(o, Decimal):
            return str(o)
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, Path):
            return o.as_posix()
        if isinstance(o, (set, frozenset)):
            return sorted(o)
        to_dict = getattr(o, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        raise SerializationError(f"Object of type {type(o).__name__} is not JSON serializable")


def dumps(obj: Any, indent: Optional[int] = None) -> str:
    return json.dumps(obj, cls=JSONEncoder, indent=indent)


def dump_json(obj: Any, path: os.PathLike[str] | str, indent: Optional[int] = None) -> None:
    if indent is None:
        indent = load_settings().json_indent
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, cls=JSONEncoder, indent=indent)


def load_json(path: os.PathLike[str] | str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SerializationError(f"{path}: invalid JSON: {e}") from e


def snapshot(holder: BalanceHolder) -> BalanceSnapshot:
    try:
        return BalanceSnapshot(**holder.to_dict())
    except (ValidationError, RegistryError) as e:
        raise SerializationError(f"cannot snapshot {holder!r}: {e}") from e


def holder_to_json(holder: BalanceHolder, indent: Optional[int] = None) -> str:
    return snapshot(holder).model_dump_json(indent=indent, exclude_none=True)


def holder_from_json(text: str | bytes) -> BalanceHolder:
    """Rebuild a holder from JSON, dispatching on its ``kind`` tag."""
    try:
        snap = BalanceSnapshot.model_validate_json(text)
    except ValidationError as e:
        raise SerializationError(f"invalid balance snapshot: {e}") from e
    try:
        cls = holder_class(snap.kind)
        return cls.from_dict(snap.model_dump(exclude_none=True))
    except (UnknownKind, InvalidArgument, TypeError) as e:
        raise SerializationError(f"cannot rebuild holder of kind {snap.kind!r}: {e}") from e
