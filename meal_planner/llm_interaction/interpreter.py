from __future__ import annotations

import json
from typing import Any, List, Tuple

from pydantic import ValidationError

from ..errors import MalformedPlanError, MissingDelimiterError
from ..schemas import DayPlan, Interpretation, MealPlan
from .prompt_texts import DELIMITER

JSON_FENCE_OPEN = "```json"
JSON_FENCE_CLOSE = "```"


# =========================
# Parsing Helpers
# =========================

def split_response(raw_text: str) -> Tuple[str, str]:
    """Split model text on the first delimiter into (steps section, plan section)."""
    steps_section, found, plan_section = raw_text.partition(DELIMITER)
    if not found:
        raise MissingDelimiterError(f"Model response does not contain the {DELIMITER!r} delimiter.")
    return steps_section, plan_section


def extract_steps(steps_section: str) -> Tuple[str, ...]:
    return tuple(
        stripped
        for stripped in (line.strip() for line in steps_section.split("\n"))
        if stripped
    )


def strip_code_fence(plan_section: str) -> str:
    """
    Remove one leading ```json and one trailing ``` marker.

    Only those two literal markers are recognized; anything else is left for
    the JSON parser to reject.
    """
    text = plan_section.strip()
    if text.startswith(JSON_FENCE_OPEN):
        text = text[len(JSON_FENCE_OPEN):]
    if text.endswith(JSON_FENCE_CLOSE):
        text = text[: -len(JSON_FENCE_CLOSE)]
    return text.strip()


def parse_plan(plan_section: str) -> MealPlan:
    cleaned = strip_code_fence(plan_section)
    try:
        data = json.loads(cleaned)
    except RecursionError as exc:
        raise MalformedPlanError("Plan is not valid JSON: nested too deeply.") from exc
    except ValueError as exc:
        # JSONDecodeError, and int literals over the interpreter's digit limit
        raise MalformedPlanError(f"Plan is not valid JSON: {exc}") from exc
    return validate_plan(data)


# =========================
# Validators
# =========================

def validate_plan(data: Any) -> MealPlan:
    if not isinstance(data, list):
        raise MalformedPlanError(f"Plan must be a JSON array, got {type(data).__name__}.")

    days: List[DayPlan] = []
    for index, item in enumerate(data):
        try:
            days.append(DayPlan.model_validate(item))
        except ValidationError as exc:
            raise MalformedPlanError(f"plan[{index}]: {_describe(exc)}") from exc
    return tuple(days)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "value"
        parts.append(f"{loc}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)


# =========================
# Entry Point
# =========================

def interpret(raw_text: str) -> Interpretation:
    """
    Turn raw model text into ordered steps and a validated meal plan.

    Raises MissingDelimiterError or MalformedPlanError; never returns a
    partially parsed plan.
    """
    steps_section, plan_section = split_response(raw_text)
    steps = extract_steps(steps_section)
    plan = parse_plan(plan_section)
    return Interpretation(steps=steps, plan=plan)


__all__ = [
    "JSON_FENCE_OPEN",
    "JSON_FENCE_CLOSE",
    "split_response",
    "extract_steps",
    "strip_code_fence",
    "parse_plan",
    "validate_plan",
    "interpret",
]
