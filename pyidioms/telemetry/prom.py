"""Prometheus integration.

Thin wrappers over ``prometheus_client`` collectors. Created collectors are
cached by name so constructing a wrapper twice (e.g. per instance, or in
tests) never registers the same metric twice.
"""
from __future__ import annotations

from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry
from prometheus_client import Counter as _PCounter, Histogram as _PHist


# Keyed by (registry, metric name).
_COUNTERS: dict[tuple[CollectorRegistry, str], _PCounter] = {}
_HISTS: dict[tuple[CollectorRegistry, str], _PHist] = {}

_registry: CollectorRegistry = REGISTRY


def use_registry(registry: CollectorRegistry) -> CollectorRegistry:
    """Route newly created collectors to ``registry``; returns the previous one."""
    global _registry
    prev = _registry
    _registry = registry
    return prev


def current_registry() -> CollectorRegistry:
    return _registry


class Counter:
    def __init__(self, name: str, desc: str = "") -> None:
        self._name = name
        key = (_registry, name)
        if key not in _COUNTERS:
            _COUNTERS[key] = _PCounter(name, desc or name, registry=_registry)
        self._c = _COUNTERS[key]

    @property
    def name(self) -> str:
        return self._name

    def inc(self, amt: float = 1.0) -> None:
        self._c.inc(amt)


class Histogram:
    def __init__(self, name: str, desc: str = "", buckets: Optional[list[float]] = None) -> None:
        self._name = name
        key = (_registry, name)
        if key not in _HISTS:
            if buckets is not None:
                _HISTS[key] = _PHist(name, desc or name, buckets=buckets, registry=_registry)
            else:
                _HISTS[key] = _PHist(name, desc or name, registry=_registry)
        self._h = _HISTS[key]

    def observe(self, val: float) -> None:
        self._h.observe(val)
