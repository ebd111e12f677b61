from __future__ import annotations

from .prompt_texts import DELIMITER, MEAL_PLAN_PROMPT


# -------------------------
# Prompt Builders
# -------------------------

def build_meal_plan_prompt(preferences: str) -> str:
    """
    Render the user's preferences into the fixed meal-plan instruction.

    Preferences are inserted verbatim. Callers are responsible for rejecting
    blank input before a request is issued.
    """
    return MEAL_PLAN_PROMPT.format(preferences=preferences, delimiter=DELIMITER)


__all__ = ["build_meal_plan_prompt"]
