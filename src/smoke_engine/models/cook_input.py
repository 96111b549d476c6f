"""Frozen cook parameters — the sole input to plan generation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from smoke_engine.models.enums import MeatCut, SmokerType, WrapMethod


@dataclass(frozen=True)
class CookPlanInput:
    """Immutable snapshot of what the pitmaster is cooking and when.

    Ranges are enforced by smoke_engine.validation before the planner sees
    the input; the planner itself trusts them.
    """

    meat_cut: MeatCut
    weight_lbs: float
    smoker_type: SmokerType
    smoker_temp_f: float
    serve_time: datetime
    wrap_method: WrapMethod = WrapMethod.NONE

    # Conditions
    ambient_temp_f: float | None = None
    altitude_ft: float | None = None

    @property
    def is_wrapped(self) -> bool:
        return self.wrap_method != WrapMethod.NONE
