"""Cook plan models: duration ranges, phases, and the full time-anchored plan.

Whole-minute and whole-point values are rounded half up (850.5 -> 851),
not with Python's round-half-to-even.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

from smoke_engine.models.enums import Confidence, PhaseName


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going toward +inf."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class DurationRange:
    """A {min, max} span in minutes."""

    min_minutes: float
    max_minutes: float

    @classmethod
    def normalized(cls, low: float, high: float, floor: float = 0.0) -> DurationRange:
        """Build a range with floor <= min <= max, swapping inverted bounds."""
        if low > high:
            low, high = high, low
        return cls(max(low, floor), max(high, floor))

    @property
    def spread(self) -> float:
        return self.max_minutes - self.min_minutes

    @property
    def midpoint(self) -> float:
        return (self.min_minutes + self.max_minutes) / 2

    def scaled(self, factor: float) -> DurationRange:
        """Multiply both bounds by *factor*, rounding to whole minutes."""
        return DurationRange.normalized(
            round_half_up(self.min_minutes * factor),
            round_half_up(self.max_minutes * factor),
        )


@dataclass(frozen=True)
class PhaseDefinition:
    """One named, time-bounded segment of a cook's timeline.

    ``start_time == end_time`` marks an instantaneous decision point such as
    the wrap decision.
    """

    name: PhaseName
    start_time: datetime
    end_time: datetime
    duration_range: DurationRange
    confidence: Confidence
    notes: str = ""
    order: int = 0

    @property
    def duration_minutes(self) -> float:
        return (self.end_time - self.start_time).total_seconds() / 60.0

    @property
    def is_instant(self) -> bool:
        return self.start_time == self.end_time


@dataclass(frozen=True)
class ConfidenceRange:
    """Earliest and latest plausible finish times."""

    earliest: datetime
    latest: datetime


@dataclass(frozen=True)
class CookPlan:
    """Complete output of plan generation.

    Never mutated: a change to any planning input produces a new plan.

    Attributes:
        phases: Chronological phases, ``order`` matching tuple position.
        predicted_finish_time: When the meat comes off heat (Rest start).
        confidence_range: Bracket around predicted_finish_time.
        overall_confidence: 0-100 score for the plan as a whole.
        recommended_start_time: Start of the first phase.
        cook_time: Adjusted smoker time range the smoke phases were built from.
        stall_time: Stall duration range, or None for cuts that don't stall.
        adjustments: Human-readable notes on every multiplier that fired.
    """

    phases: tuple[PhaseDefinition, ...]
    predicted_finish_time: datetime
    confidence_range: ConfidenceRange
    overall_confidence: int
    recommended_start_time: datetime
    cook_time: DurationRange | None = None
    stall_time: DurationRange | None = None
    adjustments: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_minutes(self) -> float:
        """Minutes from recommended start to the predicted finish."""
        return (
            self.predicted_finish_time - self.recommended_start_time
        ).total_seconds() / 60.0

    def has_phase(self, name: PhaseName) -> bool:
        return any(p.name == name for p in self.phases)

    def phase(self, name: PhaseName) -> PhaseDefinition | None:
        """Return the phase called *name*, or None if the plan lacks it."""
        for p in self.phases:
            if p.name == name:
                return p
        return None

    def phase_at(self, instant: datetime) -> PhaseDefinition | None:
        """Return the phase in progress at *instant*.

        Uses half-open [start, end) windows, so instantaneous phases are never
        "in progress". Returns None before the cook starts or after the last
        phase ends.
        """
        for p in self.phases:
            if p.start_time <= instant < p.end_time:
                return p
        return None
