from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from ..errors import PlannerError, user_message
from ..schemas import Interpretation, MealPlan


class StateTransitionError(RuntimeError):
    """Raised when a transition is applied to a state that cannot take it."""


# ================================
# States
# ================================

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class InFlight:
    """A request is outstanding; steps fill in once the response is split."""
    preferences: str
    steps: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Success:
    steps: Tuple[str, ...]
    plan: MealPlan


@dataclass(frozen=True)
class Failed:
    error: PlannerError
    message: str


GenerationState = Union[Idle, InFlight, Success, Failed]


# ================================
# Transitions
# ================================

def can_start(state: GenerationState, preferences: str) -> bool:
    return not isinstance(state, InFlight) and bool(preferences.strip())


def start(state: GenerationState, preferences: str) -> GenerationState:
    """Begin a request; returns the state unchanged when the request is rejected."""
    if not can_start(state, preferences):
        return state
    return InFlight(preferences=preferences)


def reveal_steps(state: GenerationState, steps: Tuple[str, ...]) -> InFlight:
    current = _require_in_flight(state, "reveal_steps")
    return InFlight(preferences=current.preferences, steps=tuple(steps))


def succeed(state: GenerationState, interpretation: Interpretation) -> Success:
    _require_in_flight(state, "succeed")
    return Success(steps=interpretation.steps, plan=interpretation.plan)


def fail(state: GenerationState, error: PlannerError) -> Failed:
    _require_in_flight(state, "fail")
    return Failed(error=error, message=user_message(error))


def _require_in_flight(state: GenerationState, transition: str) -> InFlight:
    if not isinstance(state, InFlight):
        raise StateTransitionError(
            f"Cannot apply '{transition}' to {type(state).__name__}; a request must be in flight."
        )
    return state


__all__ = [
    "StateTransitionError",
    "Idle",
    "InFlight",
    "Success",
    "Failed",
    "GenerationState",
    "can_start",
    "start",
    "reveal_steps",
    "succeed",
    "fail",
]
