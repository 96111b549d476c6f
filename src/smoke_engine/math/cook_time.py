"""Cook-time estimation: base tables, smoker profile, environment, and stall.

Pipeline, in order:
    1. Base range from the cut table (flat, or per-pound rate x weight).
    2. Smoker mean multiplier shifts both bounds.
    3. Smoker variance multiplier widens or narrows the spread around the
       midpoint without moving it.
    4. Environmental multiplier (ambient and altitude).
    5. Round to whole minutes and normalize so min <= max.

The stall is estimated separately because only some cuts stall and wrapping
shortens it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from smoke_engine.math.environment import environmental_factors, environmental_multiplier
from smoke_engine.models.cook_input import CookPlanInput
from smoke_engine.models.cook_plan import DurationRange
from smoke_engine.models.enums import (
    BASE_COOK_TIMES,
    SMOKER_MULTIPLIERS,
    STALL_AFFECTED_CUTS,
    STALL_DURATION_MINUTES,
    STALL_WRAP_REDUCTION_FACTOR,
    MeatCut,
    SmokerType,
    WrapMethod,
)


@dataclass(frozen=True)
class CookTimeEstimate:
    """Adjusted time on the smoker, before prep, preheat, stall and rest.

    Attributes:
        cook_time: Rounded, normalized smoker time range in minutes.
        environmental_multiplier: Combined ambient/altitude factor.
        adjustments: Explanations for each multiplier that changed the range.
    """

    cook_time: DurationRange
    environmental_multiplier: float = 1.0
    adjustments: tuple[str, ...] = field(default_factory=tuple)


def base_cook_time(meat_cut: MeatCut, weight_lbs: float) -> DurationRange:
    """Look up the unadjusted cook-time range for a cut.

    Per-pound cuts scale linearly with weight; rib racks use flat totals.
    """
    low, high, per_pound = BASE_COOK_TIMES[meat_cut]
    if per_pound:
        return DurationRange.normalized(low * weight_lbs, high * weight_lbs)
    return DurationRange.normalized(low, high)


def apply_smoker_profile(base: DurationRange, smoker_type: SmokerType) -> DurationRange:
    """Shift the mean and rescale the spread for a smoker type.

    Args:
        base: Unadjusted range in minutes.
        smoker_type: Smoker family, keyed into SMOKER_MULTIPLIERS.

    Returns:
        Unrounded range; a variance multiplier above 1.0 widens the spread
        symmetrically about the shifted midpoint, below 1.0 narrows it.
    """
    mean_factor, variance_factor = SMOKER_MULTIPLIERS[smoker_type]
    shifted_low = base.min_minutes * mean_factor
    shifted_high = base.max_minutes * mean_factor

    midpoint = (shifted_low + shifted_high) / 2
    half_spread = (shifted_high - shifted_low) * variance_factor / 2
    return DurationRange.normalized(midpoint - half_spread, midpoint + half_spread)


def estimate_cook_time(cook_input: CookPlanInput) -> CookTimeEstimate:
    """Run the full cook-time pipeline for a cook."""
    base = base_cook_time(cook_input.meat_cut, cook_input.weight_lbs)
    profiled = apply_smoker_profile(base, cook_input.smoker_type)
    mean_factor, variance_factor = SMOKER_MULTIPLIERS[cook_input.smoker_type]

    adjustments: list[str] = []
    if mean_factor != 1.0 or variance_factor != 1.0:
        adjustments.append(
            f"{cook_input.smoker_type.name.title()} smoker: "
            f"time x{mean_factor:g}, spread x{variance_factor:g}"
        )

    for explanation, factor in environmental_factors(
        cook_input.ambient_temp_f, cook_input.altitude_ft
    ):
        adjustments.append(f"{explanation}: time x{factor:g}")
    env_multiplier = environmental_multiplier(
        cook_input.ambient_temp_f, cook_input.altitude_ft
    )

    return CookTimeEstimate(
        cook_time=profiled.scaled(env_multiplier),
        environmental_multiplier=env_multiplier,
        adjustments=tuple(adjustments),
    )


def is_stall_prone(meat_cut: MeatCut) -> bool:
    """True for cuts that plateau noticeably in the 150-170°F band."""
    return meat_cut in STALL_AFFECTED_CUTS


def stall_duration(meat_cut: MeatCut, wrap_method: WrapMethod) -> DurationRange | None:
    """Estimate the stall window for a cut.

    Returns:
        Rounded range in minutes, shortened by STALL_WRAP_REDUCTION_FACTOR
        when the meat is wrapped, or None for cuts that don't stall.
    """
    if not is_stall_prone(meat_cut):
        return None

    stall = DurationRange(*STALL_DURATION_MINUTES)
    if wrap_method != WrapMethod.NONE:
        return stall.scaled(STALL_WRAP_REDUCTION_FACTOR)
    return stall.scaled(1.0)
