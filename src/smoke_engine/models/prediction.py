"""Live prediction output — derived from a plan, never written back to it."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from smoke_engine.models.enums import PredictionStatus


@dataclass(frozen=True)
class PredictionUpdate:
    """Revised finish estimate after a new internal temperature reading."""

    updated_finish_time: datetime
    adjusted_confidence: int
    status: PredictionStatus
    expected_progress: float = 0.0
    actual_progress: float = 0.0
    adjustment_minutes: int = 0  # negative = earlier than planned
