from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Protocol, Type, runtime_checkable


@dataclass(frozen=True)
class Artifact:
    """Immutable carrier of a payload and its metadata between passes."""

    payload: Any
    meta: Dict[str, Any] = field(default_factory=dict)

    def with_metrics(self, name: str, metrics: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``meta`` with ``metrics`` recorded under ``name``."""

        existing = dict(self.meta.get("metrics") or {})
        return {**self.meta, "metrics": {**existing, name: dict(metrics)}}


@runtime_checkable
class Pass(Protocol):
    name: str
    input_type: Type
    output_type: Type

    def __call__(self, a: Artifact) -> Artifact:
        """Execute the pass."""
        ...


_REGISTRY: Mapping[str, Pass] = MappingProxyType({})


def register(p: Pass) -> Pass:
    """Register a pass under its name; re-registering replaces it."""
    global _REGISTRY
    _REGISTRY = MappingProxyType({**dict(_REGISTRY), p.name: p})
    return p


def run_step(name: str, a: Artifact) -> Artifact:
    """Run a single registered step."""
    return _REGISTRY[name](a)


def run_pipeline(steps: Iterable[str], a: Artifact) -> Artifact:
    """Apply registered steps in order."""
    return reduce(lambda acc, s: run_step(s, acc), steps, a)


def registry() -> Dict[str, Pass]:
    """Shallow copy of the registry for inspection/testing."""
    return dict(_REGISTRY)
