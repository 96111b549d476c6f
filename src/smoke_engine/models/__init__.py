"""Data models for the smoke engine."""

from smoke_engine.models.cook_input import CookPlanInput
from smoke_engine.models.cook_plan import (
    ConfidenceRange,
    CookPlan,
    DurationRange,
    PhaseDefinition,
)
from smoke_engine.models.enums import (
    Confidence,
    MeatCut,
    PhaseName,
    PredictionStatus,
    SmokerType,
    WrapMethod,
)
from smoke_engine.models.prediction import PredictionUpdate

__all__ = [
    "Confidence",
    "ConfidenceRange",
    "CookPlan",
    "CookPlanInput",
    "DurationRange",
    "MeatCut",
    "PhaseDefinition",
    "PhaseName",
    "PredictionStatus",
    "PredictionUpdate",
    "SmokerType",
    "WrapMethod",
]
