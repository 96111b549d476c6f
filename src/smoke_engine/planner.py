"""Cook plan generation — builds a phase timeline backward from serve time.

Every phase is placed at its pessimistic (max) duration so that earlier
phases are never shorted. Phases are collected latest-first and reversed
once at the end, when order indices are assigned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from smoke_engine.math.confidence import confidence_range, overall_confidence
from smoke_engine.math.cook_time import estimate_cook_time, stall_duration
from smoke_engine.models.cook_input import CookPlanInput
from smoke_engine.models.cook_plan import (
    CookPlan,
    DurationRange,
    PhaseDefinition,
    round_half_up,
)
from smoke_engine.models.enums import (
    MIN_SMOKE_PHASE_MINUTES,
    PHASE_CONFIDENCE,
    PREHEAT_TIME_MINUTES,
    PREP_TIME_MINUTES,
    REST_TIME_MINUTES,
    SERVE_WINDOW_MINUTES,
    SMOKE_1_FRACTION,
    SMOKE_2_FRACTION,
    STALL_END_TEMP_F,
    STALL_START_TEMP_F,
    PhaseName,
)

logger = logging.getLogger(__name__)

_INSTANT = DurationRange(0, 0)


@dataclass(frozen=True)
class _PlacedPhase:
    name: PhaseName
    start_time: datetime
    end_time: datetime
    duration_range: DurationRange
    notes: str


class _BackwardTimeline:
    """Places phases end-to-start, each ending where the previous one began."""

    def __init__(self, anchor: datetime) -> None:
        self.anchor = anchor
        self._latest_first: list[_PlacedPhase] = []

    def place(
        self,
        name: PhaseName,
        duration_range: DurationRange,
        notes: str = "",
    ) -> datetime:
        """Place a phase ending at the current anchor; return its start."""
        start = self.anchor - timedelta(minutes=duration_range.max_minutes)
        self._latest_first.append(
            _PlacedPhase(name, start, self.anchor, duration_range, notes)
        )
        self.anchor = start
        return start

    def build(self) -> tuple[PhaseDefinition, ...]:
        """Chronological phases with order indices."""
        return tuple(
            PhaseDefinition(
                name=p.name,
                start_time=p.start_time,
                end_time=p.end_time,
                duration_range=p.duration_range,
                confidence=PHASE_CONFIDENCE[p.name],
                notes=p.notes,
                order=order,
            )
            for order, p in enumerate(reversed(self._latest_first))
        )


def _fmt(minutes: float) -> str:
    return f"{minutes:g}"


def _smoke_share(cook_time: DurationRange, fraction: float) -> DurationRange:
    return DurationRange.normalized(
        round_half_up(cook_time.min_minutes * fraction),
        round_half_up(cook_time.max_minutes * fraction),
        floor=MIN_SMOKE_PHASE_MINUTES,
    )


def generate_plan(cook_input: CookPlanInput) -> CookPlan:
    """Generate a time-anchored cook plan.

    Works backward from ``serve_time``: Rest ends half a serve window before
    serving, the smoke phases (and stall, for cuts that stall) end where
    Rest begins, and Preheat and Prep precede the first smoke phase. The
    predicted finish is the start of Rest, when the meat comes off heat.

    Args:
        cook_input: Validated cook parameters.

    Returns:
        A new CookPlan. Identical input always yields an identical plan.
    """
    estimate = estimate_cook_time(cook_input)
    cook_time = estimate.cook_time
    stall_time = stall_duration(cook_input.meat_cut, cook_input.wrap_method)
    rest_time = DurationRange(*REST_TIME_MINUTES[cook_input.meat_cut])
    smoker_temp = _fmt(cook_input.smoker_temp_f)
    wrap_label = cook_input.wrap_method.label

    timeline = _BackwardTimeline(
        cook_input.serve_time - timedelta(minutes=SERVE_WINDOW_MINUTES)
    )

    predicted_finish = timeline.place(
        PhaseName.REST,
        rest_time,
        f"Rest for {_fmt(rest_time.min_minutes)}-{_fmt(rest_time.max_minutes)} minutes minimum",
    )

    if stall_time is not None:
        timeline.place(
            PhaseName.SMOKE_2,
            _smoke_share(cook_time, SMOKE_2_FRACTION),
            f"Wrapped in {wrap_label}" if cook_input.is_wrapped else "Unwrapped cook continues",
        )
        if cook_input.is_wrapped:
            timeline.place(
                PhaseName.WRAP_DECISION,
                _INSTANT,
                f"Wrap in {wrap_label} when internal temp reaches "
                f"{STALL_START_TEMP_F}-{STALL_END_TEMP_F}°F",
            )
        timeline.place(
            PhaseName.STALL,
            stall_time,
            f"High variance - internal temp plateaus at "
            f"{STALL_START_TEMP_F}-{STALL_END_TEMP_F}°F",
        )
        smoke_1 = _smoke_share(cook_time, SMOKE_1_FRACTION)
        smoke_1_notes = f"Smoke at {smoker_temp}°F"
    else:
        smoke_1 = DurationRange.normalized(
            cook_time.min_minutes, cook_time.max_minutes, floor=MIN_SMOKE_PHASE_MINUTES
        )
        smoke_1_notes = f"Smoke at {smoker_temp}°F"
        if cook_input.is_wrapped:
            # No stall to push through, so the wrap is a note, not a phase
            smoke_1_notes += f"; wrap in {wrap_label} once the bark has set"

    timeline.place(PhaseName.SMOKE_1, smoke_1, smoke_1_notes)
    timeline.place(
        PhaseName.PREHEAT,
        DurationRange(*PREHEAT_TIME_MINUTES),
        f"Preheat smoker to {smoker_temp}°F",
    )
    recommended_start = timeline.place(
        PhaseName.PREP,
        DurationRange(*PREP_TIME_MINUTES),
        "Trim fat, apply rub, bring to room temperature",
    )

    phases = timeline.build()
    plan = CookPlan(
        phases=phases,
        predicted_finish_time=predicted_finish,
        confidence_range=confidence_range(predicted_finish, cook_time, stall_time),
        overall_confidence=overall_confidence(phases, cook_input.smoker_type),
        recommended_start_time=recommended_start,
        cook_time=cook_time,
        stall_time=stall_time,
        adjustments=estimate.adjustments,
    )

    logger.debug(
        "Planned %s %.1f lb on %s smoker: %d phases, start %s, finish %s, confidence %d",
        cook_input.meat_cut.name,
        cook_input.weight_lbs,
        cook_input.smoker_type.name,
        len(phases),
        recommended_start.isoformat(),
        predicted_finish.isoformat(),
        plan.overall_confidence,
    )
    return plan
