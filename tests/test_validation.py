"""Tests for boundary validation of cook inputs and temperature readings."""

from __future__ import annotations

import dataclasses
import math

import pytest

from smoke_engine.exceptions import CookInputError, OutOfRangeError, SmokeEngineError
from smoke_engine.models.cook_input import CookPlanInput
from smoke_engine.models.cook_plan import CookPlan
from smoke_engine.models.enums import MeatCut
from smoke_engine.validation import (
    check_range,
    default_target_temp,
    validate_plan_input,
    validate_reading,
)


class TestCheckRange:
    @pytest.mark.parametrize(
        "field, value",
        [
            ("weight_lbs", 0.5),
            ("weight_lbs", 30.0),
            ("smoker_temp_f", 175.0),
            ("smoker_temp_f", 400.0),
            ("internal_temp_f", 32.0),
            ("ambient_temp_f", -20.0),
            ("altitude_ft", 15000.0),
            ("humidity_pct", 100.0),
            ("elapsed_minutes", 4320.0),
        ],
    )
    def test_inclusive_bounds_accepted(self, field: str, value: float) -> None:
        assert check_range(field, value) == value

    @pytest.mark.parametrize(
        "field, value",
        [
            ("weight_lbs", 0.4),
            ("weight_lbs", 31.0),
            ("smoker_temp_f", 150.0),
            ("internal_temp_f", 221.0),
            ("ambient_temp_f", -21.0),
            ("altitude_ft", -1.0),
            ("humidity_pct", 101.0),
            ("elapsed_minutes", 4321.0),
        ],
    )
    def test_outside_rejected(self, field: str, value: float) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            check_range(field, value)
        assert exc_info.value.field == field
        assert exc_info.value.value == value

    def test_error_carries_bounds(self) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            check_range("weight_lbs", 45.0)
        assert exc_info.value.minimum == 0.5
        assert exc_info.value.maximum == 30.0
        assert "weight_lbs" in str(exc_info.value)

    def test_unknown_field(self) -> None:
        with pytest.raises(KeyError):
            check_range("wind_mph", 10.0)


class TestValidatePlanInput:
    def test_valid_input_passes_through(self, brisket_input: CookPlanInput) -> None:
        assert validate_plan_input(brisket_input) is brisket_input

    def test_optional_conditions_may_be_missing(self, baby_back_input: CookPlanInput) -> None:
        assert validate_plan_input(baby_back_input) is baby_back_input

    def test_heavy_brisket_rejected(self, brisket_input: CookPlanInput) -> None:
        with pytest.raises(OutOfRangeError):
            validate_plan_input(dataclasses.replace(brisket_input, weight_lbs=40.0))

    def test_altitude_rejected(self, brisket_input: CookPlanInput) -> None:
        with pytest.raises(OutOfRangeError):
            validate_plan_input(dataclasses.replace(brisket_input, altitude_ft=20000.0))

    def test_wrong_enum_rejected(self, brisket_input: CookPlanInput) -> None:
        with pytest.raises(CookInputError) as exc_info:
            validate_plan_input(dataclasses.replace(brisket_input, meat_cut="BRISKET"))
        assert exc_info.value.field == "meat_cut"

    def test_serve_time_must_be_datetime(self, brisket_input: CookPlanInput) -> None:
        with pytest.raises(CookInputError):
            validate_plan_input(
                dataclasses.replace(brisket_input, serve_time="2026-10-17T18:00")
            )

    def test_errors_share_base_class(self) -> None:
        assert issubclass(OutOfRangeError, SmokeEngineError)


class TestValidateReading:
    def test_valid_reading(self, brisket_plan: CookPlan) -> None:
        validate_reading(brisket_plan, 165.0, 360.0, 203.0)

    def test_zero_target_rejected(self, brisket_plan: CookPlan) -> None:
        with pytest.raises(OutOfRangeError):
            validate_reading(brisket_plan, 165.0, 360.0, 0.0)

    def test_negative_elapsed_rejected(self, brisket_plan: CookPlan) -> None:
        with pytest.raises(CookInputError) as exc_info:
            validate_reading(brisket_plan, 165.0, -1.0, 203.0)
        assert exc_info.value.field == "elapsed_minutes"

    @pytest.mark.parametrize("elapsed", [math.inf, -math.inf, math.nan])
    def test_non_finite_elapsed_rejected(self, brisket_plan: CookPlan, elapsed: float) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_reading(brisket_plan, 165.0, elapsed, 203.0)
        assert exc_info.value.field == "elapsed_minutes"

    def test_nan_temperature_rejected(self, brisket_plan: CookPlan) -> None:
        with pytest.raises(OutOfRangeError):
            validate_reading(brisket_plan, math.nan, 360.0, 203.0)

    def test_zero_span_plan_rejected(self, brisket_plan: CookPlan) -> None:
        collapsed = dataclasses.replace(
            brisket_plan,
            recommended_start_time=brisket_plan.confidence_range.latest,
        )
        with pytest.raises(CookInputError) as exc_info:
            validate_reading(collapsed, 165.0, 10.0, 203.0)
        assert exc_info.value.field == "plan"


class TestDefaultTargetTemp:
    def test_brisket(self) -> None:
        assert default_target_temp(MeatCut.BRISKET) == 203.0

    def test_ribs(self) -> None:
        assert default_target_temp(MeatCut.SPARE_RIBS) == 195.0
