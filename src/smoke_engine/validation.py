"""Boundary validation — run by callers before invoking the engine.

The planner and predictor assume validated input and never check it
themselves. Anything entering from a user, file or request passes through
here first.
"""

from __future__ import annotations

import logging
from datetime import datetime

from smoke_engine.exceptions import CookInputError, OutOfRangeError
from smoke_engine.models.cook_input import CookPlanInput
from smoke_engine.models.cook_plan import CookPlan
from smoke_engine.models.enums import (
    DEFAULT_TARGET_TEMPS_F,
    VALIDATION_RANGES,
    MeatCut,
    SmokerType,
    WrapMethod,
)
from smoke_engine.prediction import expected_total_minutes

logger = logging.getLogger(__name__)


def check_range(field: str, value: float) -> float:
    """Check *value* against VALIDATION_RANGES[field] (inclusive).

    Returns:
        The value unchanged.

    Raises:
        KeyError: If *field* has no configured range.
        OutOfRangeError: If the value is outside the range.
    """
    minimum, maximum = VALIDATION_RANGES[field]
    if not minimum <= value <= maximum:
        raise OutOfRangeError(field, value, minimum, maximum)
    return value


def default_target_temp(meat_cut: MeatCut) -> float:
    """Pull temperature to use when the cook doesn't specify one."""
    return DEFAULT_TARGET_TEMPS_F[meat_cut]


def validate_plan_input(cook_input: CookPlanInput) -> CookPlanInput:
    """Reject a CookPlanInput the planner can't safely schedule.

    Returns:
        The input unchanged, so calls can be chained.

    Raises:
        CookInputError: Wrong enum member or non-datetime serve time.
        OutOfRangeError: Weight, smoker temp, ambient or altitude out of range.
    """
    for field, value, enum_type in (
        ("meat_cut", cook_input.meat_cut, MeatCut),
        ("smoker_type", cook_input.smoker_type, SmokerType),
        ("wrap_method", cook_input.wrap_method, WrapMethod),
    ):
        if not isinstance(value, enum_type):
            raise CookInputError(
                f"{field} must be a {enum_type.__name__}, got {value!r}",
                field=field,
                value=value,
            )

    if not isinstance(cook_input.serve_time, datetime):
        raise CookInputError(
            f"serve_time must be a datetime, got {cook_input.serve_time!r}",
            field="serve_time",
            value=cook_input.serve_time,
        )

    check_range("weight_lbs", cook_input.weight_lbs)
    check_range("smoker_temp_f", cook_input.smoker_temp_f)
    if cook_input.ambient_temp_f is not None:
        check_range("ambient_temp_f", cook_input.ambient_temp_f)
    if cook_input.altitude_ft is not None:
        check_range("altitude_ft", cook_input.altitude_ft)

    return cook_input


def validate_reading(
    plan: CookPlan,
    current_temp_f: float,
    elapsed_minutes: float,
    target_temp_f: float,
) -> None:
    """Reject a temperature reading that update_prediction can't use.

    NaN and infinite values fall outside every range and are rejected.

    Raises:
        OutOfRangeError: Internal temperature, target temperature or elapsed
            minutes out of range.
        CookInputError: A plan with no time span.
    """
    check_range("internal_temp_f", current_temp_f)
    check_range("target_temp_f", target_temp_f)
    check_range("elapsed_minutes", elapsed_minutes)

    if expected_total_minutes(plan) <= 0:
        logger.warning("Rejected reading for a plan with no expected duration")
        raise CookInputError(
            "plan has no expected duration between start and latest finish",
            field="plan",
            value=plan.recommended_start_time,
        )
