from __future__ import annotations

import pytest

from meal_planner.llm_interaction.prompt_builders import build_meal_plan_prompt
from meal_planner.llm_interaction.prompt_texts import DELIMITER


@pytest.mark.parametrize("preferences", [
    "vegetarian, under $100 budget, I have chicken and rice already",
    "no nuts\n  high protein\n\tquick breakfasts",
    "likes {curly} braces and {0} placeholders",
])
def test_prompt_embeds_preferences_verbatim(preferences):
    prompt = build_meal_plan_prompt(preferences)
    assert preferences in prompt


def test_delimiter_appears_exactly_once():
    prompt = build_meal_plan_prompt("gluten free")
    assert prompt.count(DELIMITER) == 1


def test_sections_come_in_fixed_order():
    preferences = "pescatarian, dislikes cilantro"
    prompt = build_meal_plan_prompt(preferences)

    role = prompt.index("meal planning agent")
    prefs = prompt.index(preferences)
    steps = prompt.index("outline the steps")
    delimiter = prompt.index(DELIMITER)
    plan = prompt.index("JSON array")

    assert role < prefs < steps < delimiter < plan


def test_plan_instruction_names_keys_and_meal_format():
    prompt = build_meal_plan_prompt("anything")
    for key in ('"day"', '"breakfast"', '"lunch"', '"dinner"'):
        assert key in prompt
    assert '"Food Name, Quantity"' in prompt
    assert "Do not include any text before or after the JSON" in prompt


def test_builder_is_deterministic():
    assert build_meal_plan_prompt("keto") == build_meal_plan_prompt("keto")
