"""JSON serialization for CookPlan and PredictionUpdate objects.

Enums are written by name, instants as ISO-8601 strings and durations in
minutes. All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Iterable

from smoke_engine.exceptions import PlanFormatError
from smoke_engine.models.cook_plan import (
    ConfidenceRange,
    CookPlan,
    DurationRange,
    PhaseDefinition,
)
from smoke_engine.models.enums import Confidence, PhaseName
from smoke_engine.models.prediction import PredictionUpdate


def require_consistent_timezones(instants: Iterable[datetime], source: str) -> None:
    """Reject a set of instants that mixes naive and UTC-offset timestamps.

    Naive and aware datetimes can't be subtracted from one another, so a
    file has to use one form throughout.

    Raises:
        PlanFormatError: If some instants carry an offset and others don't.
    """
    kinds = {t.utcoffset() is not None for t in instants}
    if len(kinds) > 1:
        raise PlanFormatError(
            f"{source} mixes timestamps with and without a UTC offset"
        )


def _range_to_dict(duration: DurationRange | None) -> dict | None:
    if duration is None:
        return None
    return {"min": duration.min_minutes, "max": duration.max_minutes}


def _range_from_dict(data: dict | None) -> DurationRange | None:
    if data is None:
        return None
    return DurationRange(data["min"], data["max"])


def _phase_to_dict(phase: PhaseDefinition) -> dict:
    return {
        "name": phase.name.name,
        "label": phase.name.label,
        "startTime": phase.start_time.isoformat(),
        "endTime": phase.end_time.isoformat(),
        "durationRange": _range_to_dict(phase.duration_range),
        "confidence": phase.confidence.name,
        "notes": phase.notes,
        "order": phase.order,
    }


def _phase_from_dict(data: dict) -> PhaseDefinition:
    return PhaseDefinition(
        name=PhaseName[data["name"]],
        start_time=datetime.fromisoformat(data["startTime"]),
        end_time=datetime.fromisoformat(data["endTime"]),
        duration_range=_range_from_dict(data["durationRange"]),
        confidence=Confidence[data["confidence"]],
        notes=data.get("notes", ""),
        order=data.get("order", 0),
    )


def plan_to_dict(plan: CookPlan) -> dict:
    """Convert a CookPlan to a JSON-compatible dict."""
    return {
        "phases": [_phase_to_dict(p) for p in plan.phases],
        "predictedFinishTime": plan.predicted_finish_time.isoformat(),
        "confidenceRange": {
            "earliest": plan.confidence_range.earliest.isoformat(),
            "latest": plan.confidence_range.latest.isoformat(),
        },
        "overallConfidence": plan.overall_confidence,
        "recommendedStartTime": plan.recommended_start_time.isoformat(),
        "cookTime": _range_to_dict(plan.cook_time),
        "stallTime": _range_to_dict(plan.stall_time),
        "adjustments": list(plan.adjustments),
    }


def plan_from_dict(data: dict) -> CookPlan:
    """Rebuild a CookPlan from plan_to_dict() output.

    Raises:
        PlanFormatError: If a required key is missing, a value is malformed,
            or the timestamps mix naive and UTC-offset forms.
    """
    try:
        plan = CookPlan(
            phases=tuple(_phase_from_dict(p) for p in data["phases"]),
            predicted_finish_time=datetime.fromisoformat(data["predictedFinishTime"]),
            confidence_range=ConfidenceRange(
                earliest=datetime.fromisoformat(data["confidenceRange"]["earliest"]),
                latest=datetime.fromisoformat(data["confidenceRange"]["latest"]),
            ),
            overall_confidence=int(data["overallConfidence"]),
            recommended_start_time=datetime.fromisoformat(data["recommendedStartTime"]),
            cook_time=_range_from_dict(data.get("cookTime")),
            stall_time=_range_from_dict(data.get("stallTime")),
            adjustments=tuple(data.get("adjustments", ())),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise PlanFormatError(f"Malformed cook plan: {exc!r}") from exc

    instants = [
        plan.predicted_finish_time,
        plan.confidence_range.earliest,
        plan.confidence_range.latest,
        plan.recommended_start_time,
    ]
    for phase in plan.phases:
        instants.extend((phase.start_time, phase.end_time))
    require_consistent_timezones(instants, "cook plan")
    return plan


def prediction_to_dict(update: PredictionUpdate) -> dict:
    """Convert a PredictionUpdate to a JSON-compatible dict."""
    return {
        "updatedFinishTime": update.updated_finish_time.isoformat(),
        "adjustedConfidence": update.adjusted_confidence,
        "status": update.status.key,
        "expectedProgress": update.expected_progress,
        "actualProgress": update.actual_progress,
        "adjustmentMinutes": update.adjustment_minutes,
    }


def to_json_string(plan: CookPlan, indent: int = 2) -> str:
    """Serialize a CookPlan to a JSON string."""
    return json.dumps(plan_to_dict(plan), indent=indent, ensure_ascii=False)
