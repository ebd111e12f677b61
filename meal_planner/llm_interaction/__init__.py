# meal_planner/llm_interaction/__init__.py

"""
1) Adapter ---------- How to talk to the model
2) Prompt Builders -- How to assemble the request
3) Prompt Texts ----- What instructions to give
4) Interpreter ------ How to read the answer back
5) Registry --------- Which adapters exist


adapter.py
"How we talk to LLMs"
Transport only. Given a prompt, return the model's raw text or raise
TransportError / EmptyResponseError. Nothing else knows about Gemini or Ollama.


prompt_builders.py
"How we assemble the request"
Renders the user's free-text preferences into the fixed instruction.


prompt_texts.py
"What instructions we give to LLMs"
The template text and the DELIMITER that separates steps from the plan.


interpreter.py
"Convert text to python"
-split_response = (steps section, plan section)
-extract_steps = tuple of step lines
-strip_code_fence / parse_plan = validated tuple of DayPlan
-interpret = all of the above in one pure call


registry.py
"Which adapters exist"
{
  "gemini": GeminiAdapter,
  "ollama": OllamaAdapter,
}
"""

from .adapter import GeminiAdapter, LLMAdapter, OllamaAdapter
from .interpreter import interpret
from .prompt_builders import build_meal_plan_prompt
from .prompt_texts import DELIMITER
from .registry import build_adapter

__all__ = [
    "DELIMITER",
    "LLMAdapter",
    "GeminiAdapter",
    "OllamaAdapter",
    "build_adapter",
    "build_meal_plan_prompt",
    "interpret",
]
