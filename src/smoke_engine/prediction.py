"""Live re-prediction from internal temperature readings.

Progress is approximated linearly: ``current_temp / target_temp`` against
``elapsed / total_expected``. Real temperature rise is non-linear through
the stall, which this proxy does not model.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from smoke_engine.math.confidence import clamp_score
from smoke_engine.models.cook_plan import CookPlan, round_half_up
from smoke_engine.models.enums import (
    PREDICTION_ADJUSTMENT_WEIGHT,
    PREDICTION_MAX_CONFIDENCE_PENALTY,
    PREDICTION_TOLERANCE,
    PredictionStatus,
)
from smoke_engine.models.prediction import PredictionUpdate

logger = logging.getLogger(__name__)


def expected_total_minutes(plan: CookPlan) -> float:
    """Minutes from recommended start to the latest plausible finish."""
    return (
        plan.confidence_range.latest - plan.recommended_start_time
    ).total_seconds() / 60.0


def update_prediction(
    plan: CookPlan,
    current_temp_f: float,
    elapsed_minutes: float,
    target_temp_f: float,
) -> PredictionUpdate:
    """Revise a plan's finish estimate from a new internal temperature.

    Status is AHEAD when actual progress exceeds expected by more than
    PREDICTION_TOLERANCE (relative), BEHIND when it trails by more than that,
    ON_TRACK otherwise. Off-track finishes move by 30% of the progress gap
    projected over the expected total.

    Callers must reject a zero target temperature or a zero-length plan
    before calling (see validation.validate_reading).

    Args:
        plan: The original, unmodified plan.
        current_temp_f: Latest internal meat temperature.
        elapsed_minutes: Minutes since the recommended start.
        target_temp_f: Pull temperature for the cook.

    Returns:
        A PredictionUpdate; the plan itself is left untouched.
    """
    total_minutes = expected_total_minutes(plan)
    expected = elapsed_minutes / total_minutes
    actual = current_temp_f / target_temp_f
    gap = actual - expected

    if actual > expected * (1 + PREDICTION_TOLERANCE):
        status = PredictionStatus.AHEAD
        adjustment = -round_half_up(gap * total_minutes * PREDICTION_ADJUSTMENT_WEIGHT)
    elif actual < expected * (1 - PREDICTION_TOLERANCE):
        status = PredictionStatus.BEHIND
        adjustment = round_half_up(-gap * total_minutes * PREDICTION_ADJUSTMENT_WEIGHT)
    else:
        status = PredictionStatus.ON_TRACK
        adjustment = 0

    deviation = min(abs(gap), 1.0)
    confidence = clamp_score(
        plan.overall_confidence - deviation * PREDICTION_MAX_CONFIDENCE_PENALTY
    )

    logger.debug(
        "Prediction update: expected %.3f actual %.3f -> %s (%+d min, confidence %d)",
        expected,
        actual,
        status.key,
        adjustment,
        confidence,
    )

    return PredictionUpdate(
        updated_finish_time=plan.predicted_finish_time + timedelta(minutes=adjustment),
        adjusted_confidence=confidence,
        status=status,
        expected_progress=expected,
        actual_progress=actual,
        adjustment_minutes=int(adjustment),
    )
