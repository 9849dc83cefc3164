"""Circuit breaker state dataclasses."""

from __future__ import annotations

from typing import Literal, Protocol
from dataclasses import dataclass

CircuitPhase = Literal["closed", "open", "half_open"]


@dataclass(slots=True)
class CircuitState:
    """Mutable per-name breaker state, created lazily on first use.

    Attributes:
        state: Current phase. ``half_open`` is only stored while a probe
            call is in flight.
        failures: Consecutive failures since the last success.
        last_failure_at: Clock reading of the most recent failure.
        last_success_at: Clock reading of the most recent success.
        probe_in_flight: True while the single half-open probe runs.
    """

    state: CircuitPhase = "closed"
    failures: int = 0
    last_failure_at: float | None = None
    last_success_at: float | None = None
    probe_in_flight: bool = False


@dataclass(frozen=True, slots=True)
class CircuitStatus:
    """Read-only snapshot reported by health checks."""

    name: str
    state: CircuitPhase
    failures: int


class CircuitStore(Protocol):
    """Keyed storage for breaker state.

    The breaker mutates the returned object and hands it back through
    ``save`` so shared external stores can persist it.
    """

    def get_or_create(self, name: str) -> CircuitState: ...

    def get(self, name: str) -> CircuitState | None: ...

    def save(self, name: str, state: CircuitState) -> None: ...


__all__ = ["CircuitPhase", "CircuitState", "CircuitStatus", "CircuitStore"]
