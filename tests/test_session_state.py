from __future__ import annotations

import pytest

from meal_planner.errors import INVALID_PLAN_MESSAGE, MalformedPlanError, TransportError
from meal_planner.runtime_flow.session_state import (
    Failed,
    Idle,
    InFlight,
    StateTransitionError,
    Success,
    can_start,
    fail,
    reveal_steps,
    start,
    succeed,
)
from meal_planner.schemas import DayPlan, Interpretation


def test_start_from_idle_enters_in_flight():
    state = start(Idle(), "vegan")
    assert state == InFlight(preferences="vegan", steps=())


@pytest.mark.parametrize("preferences", ["", "   ", "\n\t"])
def test_blank_preferences_are_rejected(preferences):
    idle = Idle()
    assert not can_start(idle, preferences)
    assert start(idle, preferences) is idle


def test_start_while_in_flight_is_a_no_op():
    busy = InFlight(preferences="vegan")
    assert start(busy, "keto") is busy


def test_can_restart_after_failure_or_success():
    failed = Failed(error=TransportError("boom"), message="x")
    done = Success(steps=(), plan=())
    assert isinstance(start(failed, "again"), InFlight)
    assert isinstance(start(done, "again"), InFlight)


def test_full_success_path(sample_plan):
    plan = tuple(DayPlan(**d) for d in sample_plan)
    state = start(Idle(), "vegan")
    state = reveal_steps(state, ("Analyze",))
    assert state.steps == ("Analyze",)

    final = succeed(state, Interpretation(steps=("Analyze",), plan=plan))

    assert final == Success(steps=("Analyze",), plan=plan)


def test_fail_carries_user_message():
    error = MalformedPlanError("bad json")
    final = fail(InFlight(preferences="vegan", steps=("Analyze",)), error)
    assert final.error is error
    assert final.message == INVALID_PLAN_MESSAGE


@pytest.mark.parametrize("transition", [
    lambda s: reveal_steps(s, ()),
    lambda s: succeed(s, Interpretation()),
    lambda s: fail(s, TransportError("x")),
])
def test_transitions_require_in_flight(transition):
    with pytest.raises(StateTransitionError):
        transition(Idle())
