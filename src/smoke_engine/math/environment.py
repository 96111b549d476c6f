"""Environmental cook-time adjustment for ambient temperature and altitude.

Cold air pulls heat out of the cook chamber and lengthens the cook; hot days
shorten it. At altitude water boils lower, so evaporative cooling runs
cooler and the cook drags. Ambient and altitude effects are independent and
compound multiplicatively.
"""

from __future__ import annotations

from smoke_engine.models.enums import (
    COLD_AMBIENT_MULTIPLIER,
    COLD_AMBIENT_THRESHOLD_F,
    HIGH_ALTITUDE_MULTIPLIER,
    HIGH_ALTITUDE_THRESHOLD_FT,
    HOT_AMBIENT_MULTIPLIER,
    HOT_AMBIENT_THRESHOLD_F,
)


def environmental_factors(
    ambient_temp_f: float | None,
    altitude_ft: float | None = None,
) -> tuple[tuple[str, float], ...]:
    """List every environmental factor that applies, as (explanation, multiplier).

    Args:
        ambient_temp_f: Outdoor temperature in °F, or None if unknown.
        altitude_ft: Site altitude in feet, or None if unknown.

    Returns:
        Tuple of (explanation, multiplier) pairs; empty when nothing applies.
    """
    factors: list[tuple[str, float]] = []

    if ambient_temp_f is not None:
        if ambient_temp_f < COLD_AMBIENT_THRESHOLD_F:
            factors.append((
                f"Cold ambient ({ambient_temp_f:g}°F < {COLD_AMBIENT_THRESHOLD_F:g}°F)",
                COLD_AMBIENT_MULTIPLIER,
            ))
        elif ambient_temp_f > HOT_AMBIENT_THRESHOLD_F:
            factors.append((
                f"Hot ambient ({ambient_temp_f:g}°F > {HOT_AMBIENT_THRESHOLD_F:g}°F)",
                HOT_AMBIENT_MULTIPLIER,
            ))

    if altitude_ft is not None and altitude_ft > HIGH_ALTITUDE_THRESHOLD_FT:
        factors.append((
            f"High altitude ({altitude_ft:g} ft > {HIGH_ALTITUDE_THRESHOLD_FT:g} ft)",
            HIGH_ALTITUDE_MULTIPLIER,
        ))

    return tuple(factors)


def environmental_multiplier(
    ambient_temp_f: float | None,
    altitude_ft: float | None = None,
) -> float:
    """Combined cook-time multiplier for the given conditions.

    Returns 1.0 when neither ambient temperature nor altitude crosses a
    threshold, e.g. 1.12 * 1.10 = 1.232 for a cold day at 6000 ft.
    """
    multiplier = 1.0
    for _, factor in environmental_factors(ambient_temp_f, altitude_ft):
        multiplier *= factor
    return multiplier
