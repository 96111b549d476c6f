"""Cook-plan generation and live re-prediction for low-and-slow smoking."""

from smoke_engine.planner import generate_plan
from smoke_engine.prediction import update_prediction

__all__ = ["generate_plan", "update_prediction"]
