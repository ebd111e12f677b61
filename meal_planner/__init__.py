"""Weekly meal planning agent built on a single structured LLM prompt."""

from .config import PlannerConfig
from .llm_interaction import DELIMITER, build_meal_plan_prompt, interpret
from .rendering import MealEntry, split_entry
from .runtime_flow import MealPlanSession, create_session
from .schemas import DayPlan, Interpretation

__all__ = [
    "DELIMITER",
    "DayPlan",
    "Interpretation",
    "MealEntry",
    "MealPlanSession",
    "PlannerConfig",
    "build_meal_plan_prompt",
    "create_session",
    "interpret",
    "split_entry",
]
