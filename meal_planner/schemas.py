from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .rendering import MealEntry

MEAL_KEYS = ("breakfast", "lunch", "dinner")


class DayPlan(BaseModel):
    """One day of the weekly plan as emitted by the model."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    day: StrictStr = Field(description="Day label, e.g. 'Monday'")
    breakfast: StrictStr = Field(description="Meal formatted as 'Food Name, Quantity'")
    lunch: StrictStr = Field(description="Meal formatted as 'Food Name, Quantity'")
    dinner: StrictStr = Field(description="Meal formatted as 'Food Name, Quantity'")

    def meals(self) -> List[Tuple[str, MealEntry]]:
        return [(key, MealEntry.from_raw(getattr(self, key))) for key in MEAL_KEYS]

    def to_json(self) -> Dict[str, str]:
        return self.model_dump()


MealPlan = Tuple[DayPlan, ...]


@dataclass(frozen=True)
class Interpretation:
    steps: Tuple[str, ...] = field(default_factory=tuple)
    plan: MealPlan = field(default_factory=tuple)

    def to_json(self) -> Dict[str, Any]:
        return {
            "steps": list(self.steps),
            "plan": [day_plan.to_json() for day_plan in self.plan],
        }


__all__ = ["MEAL_KEYS", "DayPlan", "MealPlan", "Interpretation"]
