from .pipeline import MealPlanSession, create_session
from .session_state import Failed, GenerationState, Idle, InFlight, Success

__all__ = [
    "MealPlanSession",
    "create_session",
    "GenerationState",
    "Idle",
    "InFlight",
    "Success",
    "Failed",
]
