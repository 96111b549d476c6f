"""Prediction accuracy and confidence-range calibration from finished cooks.

The half-width of a plan's confidence range is ``variance * fraction``.
The default fraction is a guess; once a pitmaster has a history of cooks
with predicted and actual finish times, the fraction can be fitted so that
a chosen share of past finishes would have landed inside the range.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

import numpy as np

from smoke_engine.models.cook_plan import round_half_up


@dataclass(frozen=True)
class FinishRecord:
    """Predicted vs actual finish for one completed cook.

    Attributes:
        predicted_finish: Planned time the meat came off heat.
        actual_finish: When it actually came off.
        variance_minutes: Total variance minutes the plan was built with.
    """

    predicted_finish: datetime
    actual_finish: datetime
    variance_minutes: float = 0.0

    @property
    def error_minutes(self) -> float:
        """Signed error; positive = finished later than predicted."""
        return (self.actual_finish - self.predicted_finish).total_seconds() / 60.0


def prediction_accuracy_minutes(records: Sequence[FinishRecord]) -> int:
    """Mean absolute finish-time error in whole minutes (0 with no history)."""
    if not records:
        return 0
    errors = np.abs(np.array([r.error_minutes for r in records], dtype=np.float64))
    return round_half_up(float(np.mean(errors)))


def calibrate_variance_fraction(
    records: Sequence[FinishRecord],
    coverage: float = 0.8,
) -> float | None:
    """Fit the confidence-range variance fraction to historical outcomes.

    For each cook the ratio ``|error| / variance_minutes`` is the smallest
    fraction that would have bracketed its actual finish. The requested
    quantile of those ratios is the fraction that would have covered that
    share of cooks.

    Args:
        records: Completed cooks. Records with no variance are ignored.
        coverage: Share of cooks the range should have contained, in (0, 1].

    Returns:
        Calibrated fraction, or None if no record has positive variance.

    Raises:
        ValueError: If coverage is outside (0, 1].
    """
    if not 0.0 < coverage <= 1.0:
        raise ValueError(f"coverage must be in (0, 1], got {coverage}")

    usable = [r for r in records if r.variance_minutes > 0]
    if not usable:
        return None

    errors = np.abs(np.array([r.error_minutes for r in usable], dtype=np.float64))
    variances = np.array([r.variance_minutes for r in usable], dtype=np.float64)
    ratios = errors / variances
    return float(np.quantile(ratios, coverage))
