# tests/conftest.py
# ============================================================
# Shared pytest fixtures for all tests under tests/:
#   - sample_plan: a small well-formed weekly plan (list of dicts)
#   - make_response: builds raw model text (steps + delimiter + plan)
#   - ScriptedAdapter: fake LLM adapter that replays canned answers
# ============================================================

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest


# ---------- Ensure project root is importable ----------
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from meal_planner.llm_interaction.adapter import LLMAdapter  # noqa: E402
from meal_planner.llm_interaction.prompt_texts import DELIMITER  # noqa: E402


SAMPLE_STEPS = [
    "1. Analyze user preferences",
    "2. Search for suitable recipes",
    "3. Create a balanced weekly schedule",
]


@pytest.fixture
def sample_plan() -> List[Dict[str, str]]:
    return [
        {
            "day": "Monday",
            "breakfast": "Oatmeal, 1 cup",
            "lunch": "Chickpea Salad, 2 cups",
            "dinner": "Lentil Stew, 2 cups, extra spicy",
        },
        {
            "day": "Tuesday",
            "breakfast": "Greek Yogurt, 200 g",
            "lunch": "Veggie Wrap",
            "dinner": "Tofu Stir-Fry, 1 plate",
        },
    ]


def build_response(
    steps: List[str],
    plan: Any,
    *,
    fenced: bool = False,
    delimiter: str = DELIMITER,
) -> str:
    body = plan if isinstance(plan, str) else json.dumps(plan, indent=2)
    if fenced:
        body = f"```json\n{body}\n```"
    return "\n".join(steps) + f"\n\n{delimiter}\n" + body


@pytest.fixture
def make_response():
    return build_response


class ScriptedAdapter(LLMAdapter):
    """
    Fake adapter: returns queued answers in order.
    An answer that is an exception instance is raised instead.
    When `gate` is set, each call waits on it before answering.
    """

    stage = "scripted"

    def __init__(self, answers: List[Any], *, gate: Optional[asyncio.Event] = None) -> None:
        super().__init__("scripted-model")
        self.answers = list(answers)
        self.gate = gate
        self.prompts: List[str] = []

    async def request_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def scripted_adapter():
    return ScriptedAdapter
