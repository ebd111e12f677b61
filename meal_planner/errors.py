from __future__ import annotations


class PlannerError(RuntimeError):
    """Base class for every failure of a meal-plan generation request."""


class TransportError(PlannerError):
    """Raised when the model endpoint cannot be reached or answers with an error status."""


class EmptyResponseError(PlannerError):
    """Raised when a successful model response carries no generated text."""


class InterpretError(PlannerError):
    """Raised when the model text violates the steps/delimiter/plan contract."""


class MissingDelimiterError(InterpretError):
    """The plan delimiter never appeared in the model text."""


class MalformedPlanError(InterpretError):
    """The plan section is not valid JSON or does not have the day-plan shape."""


INVALID_PLAN_MESSAGE = "The agent generated an invalid plan format. Please try again."
MISSING_PLAN_MESSAGE = "The agent did not separate its steps from the meal plan. Please try again."


def user_message(exc: PlannerError) -> str:
    """Turn a generation error into the single notice shown to the user."""
    if isinstance(exc, MalformedPlanError):
        return INVALID_PLAN_MESSAGE
    if isinstance(exc, MissingDelimiterError):
        return MISSING_PLAN_MESSAGE
    return f"An error occurred: {exc}"


__all__ = [
    "PlannerError",
    "TransportError",
    "EmptyResponseError",
    "InterpretError",
    "MissingDelimiterError",
    "MalformedPlanError",
    "INVALID_PLAN_MESSAGE",
    "MISSING_PLAN_MESSAGE",
    "user_message",
]
