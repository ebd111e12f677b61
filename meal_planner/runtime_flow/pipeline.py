from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

from ..config import PlannerConfig
from ..errors import PlannerError
from ..llm_interaction.adapter import LLMAdapter
from ..llm_interaction.interpreter import extract_steps, parse_plan, split_response
from ..llm_interaction.prompt_builders import build_meal_plan_prompt
from ..llm_interaction.registry import build_adapter
from ..schemas import Interpretation
from .session_state import (
    GenerationState,
    Idle,
    InFlight,
    can_start,
    fail,
    reveal_steps,
    start,
    succeed,
)

logger = logging.getLogger(__name__)

Listener = Callable[[GenerationState], None]


class MealPlanSession:
    """
    Owns the current generation state and runs one request at a time.

    Flow per request:
    -build prompt
    -call adapter
    -split response and publish the steps
    -wait reveal_delay
    -parse plan and publish Success (or Failed)
    """

    def __init__(
        self,
        adapter: LLMAdapter,
        *,
        reveal_delay: float = 0.0,
        on_update: Optional[Listener] = None,
        verbose: bool = False,
    ) -> None:
        self.adapter = adapter
        self.reveal_delay = max(0.0, reveal_delay)
        self.verbose = verbose
        self.state: GenerationState = Idle()
        self.last_trace: Optional[Dict[str, Any]] = None
        self._listeners: List[Listener] = []
        if on_update is not None:
            self.subscribe(on_update)

    # -----------------------

    @property
    def in_flight(self) -> bool:
        return isinstance(self.state, InFlight)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback for every state change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _set(self, state: GenerationState) -> None:
        self.state = state
        for listener in list(self._listeners):
            listener(state)

    # -----------------------

    async def generate(self, preferences: str) -> Optional[GenerationState]:
        """
        Run one generation request.

        Returns None without doing anything when a request is already in
        flight or the preferences are blank; otherwise returns the final
        Success or Failed state.
        """
        if not can_start(self.state, preferences):
            logger.debug(
                "Ignoring generate request: %s",
                "request already in flight" if self.in_flight else "blank preferences",
            )
            return None

        # must happen before the first await
        self._set(start(self.state, preferences))

        prompt = build_meal_plan_prompt(preferences)
        trace: Optional[Dict[str, Any]] = (
            {"prompt": prompt, "raw": None, "steps": (), "error": None} if self.verbose else None
        )
        if self.verbose:
            logger.info("[GENERATE] request started (%s chars of preferences)", len(preferences))

        try:
            raw = await self.adapter.request_text(prompt)
            logger.debug("Raw model output:\n%s", raw)
            if trace is not None:
                trace["raw"] = raw

            steps_section, plan_section = split_response(raw)
            steps = extract_steps(steps_section)
            if trace is not None:
                trace["steps"] = steps
            self._set(reveal_steps(self.state, steps))

            if self.reveal_delay:
                await asyncio.sleep(self.reveal_delay)

            plan = parse_plan(plan_section)

        except PlannerError as exc:
            logger.warning("[GENERATE] %s: %s", type(exc).__name__, exc)
            if trace is not None:
                trace["error"] = f"{type(exc).__name__}: {exc}"
            self._set(fail(self.state, exc))

        except BaseException:
            # includes cancellation; never leave the session locked in InFlight
            if self.in_flight:
                self._set(Idle())
            raise

        else:
            if self.verbose:
                logger.info("[GENERATE] plan ready (%s steps, %s days)", len(steps), len(plan))
            self._set(succeed(self.state, Interpretation(steps=steps, plan=plan)))

        finally:
            if trace is not None:
                self.last_trace = trace

        return self.state


def create_session(
    config: Optional[PlannerConfig] = None,
    *,
    on_update: Optional[Listener] = None,
) -> MealPlanSession:
    config = config or PlannerConfig.from_env()
    return MealPlanSession(
        build_adapter(config),
        reveal_delay=config.reveal_delay,
        on_update=on_update,
        verbose=config.verbose,
    )


__all__ = ["MealPlanSession", "create_session"]
