"""Configuration settings for the meal planning agent."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-05-20"
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_OLLAMA_MODEL = "llama3.1"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class PlannerConfig:
    """Which model to call and how the session paces its updates."""
    backend: str = "gemini"
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_api_base: str = DEFAULT_GEMINI_API_BASE
    ollama_model: str = DEFAULT_OLLAMA_MODEL
    ollama_host: Optional[str] = None
    request_timeout: float = 60.0
    reveal_delay: float = 2.0
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PlannerConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            backend=(env.get("MEAL_PLANNER_BACKEND") or defaults.backend).strip().lower(),
            gemini_api_key=_get_env_key(env, "GEMINI_API_KEY"),
            gemini_model=env.get("GEMINI_MODEL") or defaults.gemini_model,
            gemini_api_base=env.get("GEMINI_API_BASE") or defaults.gemini_api_base,
            ollama_model=env.get("OLLAMA_MODEL") or defaults.ollama_model,
            ollama_host=env.get("OLLAMA_HOST") or None,
            request_timeout=_get_float(env, "MEAL_PLANNER_TIMEOUT", defaults.request_timeout),
            reveal_delay=_get_float(env, "MEAL_PLANNER_REVEAL_DELAY", defaults.reveal_delay),
            verbose=env.get("MEAL_PLANNER_VERBOSE", "").strip().lower() in _TRUTHY,
        )


def _get_env_key(env: Mapping[str, str], env_var: str) -> str:
    raw = env.get(env_var, "").strip()
    # secret managers sometimes hand over {"GEMINI_API_KEY": "..."} or a quoted value
    if raw.startswith("{") and ":" in raw:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, dict):
            for key in (env_var, "api_key", "key"):
                if isinstance(data.get(key), str):
                    return data[key].strip().strip('"')
    return raw.strip('"')


def _get_float(env: Mapping[str, str], env_var: str, default: float) -> float:
    raw = env.get(env_var)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", env_var, raw, default)
        return default
    return max(0.0, value)


__all__ = ["PlannerConfig"]
