"""Plan confidence: overall score, qualitative level, and finish-time range."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from smoke_engine.models.cook_plan import (
    ConfidenceRange,
    DurationRange,
    PhaseDefinition,
    round_half_up,
)
from smoke_engine.models.enums import (
    CONFIDENCE_BASE_SCORE,
    CONFIDENCE_HIGH_THRESHOLD,
    CONFIDENCE_LOW_PHASE_PENALTY,
    CONFIDENCE_MAX_SCORE,
    CONFIDENCE_MEDIUM_PHASE_PENALTY,
    CONFIDENCE_MEDIUM_THRESHOLD,
    CONFIDENCE_MIN_SCORE,
    CONFIDENCE_RANGE_VARIANCE_FRACTION,
    CONFIDENCE_VARIANCE_PENALTY,
    SMOKER_MULTIPLIERS,
    Confidence,
    SmokerType,
)


def confidence_level(score: float) -> Confidence:
    """Map a 0-100 score onto HIGH (>= 70), MEDIUM (>= 40) or LOW."""
    if score >= CONFIDENCE_HIGH_THRESHOLD:
        return Confidence.HIGH
    if score >= CONFIDENCE_MEDIUM_THRESHOLD:
        return Confidence.MEDIUM
    return Confidence.LOW


def clamp_score(score: float) -> int:
    """Round and clamp a score into [CONFIDENCE_MIN_SCORE, CONFIDENCE_MAX_SCORE]."""
    return int(max(CONFIDENCE_MIN_SCORE, min(CONFIDENCE_MAX_SCORE, round_half_up(score))))


def overall_confidence(
    phases: Iterable[PhaseDefinition],
    smoker_type: SmokerType,
) -> int:
    """Score a plan's predictive reliability.

    Starts at 100 and moves by CONFIDENCE_VARIANCE_PENALTY points per unit of
    the smoker's variance multiplier away from 1.0, so steady smokers start
    above 100 and swingy ones below. Each LOW phase then costs 10 points and
    each MEDIUM phase 5. The result is clamped to [20, 100].

    Args:
        phases: Assembled plan phases.
        smoker_type: Smoker family, keyed into SMOKER_MULTIPLIERS.

    Returns:
        Integer score in [20, 100].
    """
    _, variance_factor = SMOKER_MULTIPLIERS[smoker_type]
    score = CONFIDENCE_BASE_SCORE - (variance_factor - 1.0) * CONFIDENCE_VARIANCE_PENALTY

    for phase in phases:
        if phase.confidence == Confidence.LOW:
            score -= CONFIDENCE_LOW_PHASE_PENALTY
        elif phase.confidence == Confidence.MEDIUM:
            score -= CONFIDENCE_MEDIUM_PHASE_PENALTY

    return clamp_score(score)


def total_variance_minutes(
    cook_time: DurationRange,
    stall_time: DurationRange | None = None,
) -> float:
    """Uncertainty budget: cook-time spread plus stall spread (if any)."""
    variance = cook_time.spread
    if stall_time is not None:
        variance += stall_time.spread
    return variance


def confidence_range(
    predicted_finish: datetime,
    cook_time: DurationRange,
    stall_time: DurationRange | None = None,
    variance_fraction: float = CONFIDENCE_RANGE_VARIANCE_FRACTION,
) -> ConfidenceRange:
    """Bracket the predicted finish symmetrically.

    The half-width is ``total_variance_minutes * variance_fraction``. With the
    default fraction of 0.5 the range spans exactly the total variance. A
    zero-variance plan collapses to a single instant.
    """
    half_width = timedelta(
        minutes=total_variance_minutes(cook_time, stall_time) * variance_fraction
    )
    return ConfidenceRange(
        earliest=predicted_finish - half_width,
        latest=predicted_finish + half_width,
    )
