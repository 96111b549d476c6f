"""Serialization module — export plans and predictions as JSON."""

from smoke_engine.serialization.plan_json import (
    plan_from_dict,
    plan_to_dict,
    prediction_to_dict,
    require_consistent_timezones,
    to_json_string,
)

__all__ = [
    "plan_from_dict",
    "plan_to_dict",
    "prediction_to_dict",
    "require_consistent_timezones",
    "to_json_string",
]
