from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Sequence, Tuple

if TYPE_CHECKING:
    from .schemas import DayPlan


THINKING_PLACEHOLDER = "Thinking..."


def split_entry(raw: str) -> Tuple[str, str]:
    """
    Split a "Food Name, Quantity" meal string on its first comma.

    Everything after the first comma is the quantity, so extra commas survive:
    "Stew, 2 cups, extra spicy" -> ("Stew", "2 cups, extra spicy").
    A value without a comma has an empty quantity.
    """
    food_name, _, quantity = raw.partition(",")
    return food_name.strip(), quantity.strip()


@dataclass(frozen=True)
class MealEntry:
    food_name: str
    quantity: str = ""

    @classmethod
    def from_raw(cls, raw: str) -> "MealEntry":
        food_name, quantity = split_entry(raw)
        return cls(food_name=food_name, quantity=quantity)

    def display(self) -> str:
        if not self.quantity:
            return self.food_name
        return f"{self.food_name}, {self.quantity}"


# -------------------------
# Plan projections
# -------------------------

def plan_rows(plan: Iterable["DayPlan"]) -> List[Tuple[str, MealEntry, MealEntry, MealEntry]]:
    """One (day, breakfast, lunch, dinner) row per day, in plan order."""
    rows = []
    for day_plan in plan:
        rows.append((
            day_plan.day,
            MealEntry.from_raw(day_plan.breakfast),
            MealEntry.from_raw(day_plan.lunch),
            MealEntry.from_raw(day_plan.dinner),
        ))
    return rows


def step_lines(steps: Sequence[str]) -> List[str]:
    return list(steps) if steps else [THINKING_PLACEHOLDER]


__all__ = [
    "THINKING_PLACEHOLDER",
    "MealEntry",
    "split_entry",
    "plan_rows",
    "step_lines",
]
