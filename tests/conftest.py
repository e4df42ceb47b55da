from __future__ import annotations

import pytest
from prometheus_client import CollectorRegistry

from pyidioms.config import DEFAULT_SETTINGS, Settings
from pyidioms.core.balance import BalanceHolder, BankAccount
from pyidioms.telemetry import prom


@pytest.fixture(scope="session")
def settings() -> Settings:
    # One immutable-by-convention settings object shared across the run
    return DEFAULT_SETTINGS


@pytest.fixture(scope="module")
def metrics_registry():
    reg = CollectorRegistry()
    prev = prom.use_registry(reg)
    yield reg
    prom.use_registry(prev)


@pytest.fixture
def holder(metrics_registry) -> BalanceHolder:  # noqa: ANN001
    return BalanceHolder(100)


@pytest.fixture
def account(metrics_registry) -> BankAccount:  # noqa: ANN001
    return BankAccount(25, owner="ada")


class FakeClock:
    """Deterministic clock: returns queued readings in order."""

    def __init__(self, *readings: float) -> None:
        self._readings = list(readings)
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        return self._readings.pop(0)


@pytest.fixture
def fake_clock():
    return FakeClock
