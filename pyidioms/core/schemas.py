"""Shared schema types for JSON interchange.

Pydantic models validate payloads coming back in from JSON; the in-memory
constructs keep their own invariants.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Versioning for serialized snapshots
SNAPSHOT_SCHEMA_VERSION: str = "1"


class BalanceSnapshot(BaseModel):
    kind: str = "balance"
    value: float = Field(ge=0)
    owner: Optional[str] = None
    schema_version: str = SNAPSHOT_SCHEMA_VERSION

    model_config = ConfigDict(extra="forbid")

    @field_validator("value", mode="before")
    @classmethod
    def _reject_bool(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("value must be a number, not a bool")
        return value


class TimerRecord(BaseModel):
    name: str
    start: float
    end: float
    duration: float = Field(ge=0)

    @model_validator(mode="after")
    def _duration_matches(self) -> "TimerRecord":
        if self.duration != self.end - self.start:
            raise ValueError("duration must equal end - start")
        return self
