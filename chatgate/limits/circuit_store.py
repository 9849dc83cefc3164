"""In-process store for circuit breaker state."""

from __future__ import annotations

from ..state.circuit import CircuitState


class InMemoryCircuitStore:
    """Dict-backed breaker store; states are created lazily per name."""

    def __init__(self) -> None:
        self._states: dict[str, CircuitState] = {}

    def get(self, name: str) -> CircuitState | None:
        return self._states.get(name)

    def get_or_create(self, name: str) -> CircuitState:
        state = self._states.get(name)
        if state is None:
            state = CircuitState()
            self._states[name] = state
        return state

    def save(self, name: str, state: CircuitState) -> None:
        self._states[name] = state


__all__ = ["InMemoryCircuitStore"]
