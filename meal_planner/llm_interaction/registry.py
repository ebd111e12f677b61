from __future__ import annotations

from typing import Callable, Dict

from ..config import PlannerConfig
from .adapter import GeminiAdapter, LLMAdapter, OllamaAdapter


def _gemini(config: PlannerConfig) -> LLMAdapter:
    return GeminiAdapter(
        config.gemini_model,
        api_key=config.gemini_api_key,
        api_base=config.gemini_api_base,
        timeout=config.request_timeout,
        verbose=config.verbose,
    )


def _ollama(config: PlannerConfig) -> LLMAdapter:
    return OllamaAdapter(
        config.ollama_model,
        host=config.ollama_host,
        timeout=config.request_timeout,
        verbose=config.verbose,
    )


ADAPTERS: Dict[str, Callable[[PlannerConfig], LLMAdapter]] = {
    "gemini": _gemini,
    "ollama": _ollama,
}


def build_adapter(config: PlannerConfig) -> LLMAdapter:
    try:
        factory = ADAPTERS[config.backend]
    except KeyError:
        known = ", ".join(sorted(ADAPTERS))
        raise ValueError(f"Unknown backend '{config.backend}' (expected one of: {known})") from None
    return factory(config)


__all__ = ["ADAPTERS", "build_adapter"]
