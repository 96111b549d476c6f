"""Tests for cook-time estimation and stall duration."""

from __future__ import annotations

import dataclasses

import pytest

from smoke_engine.math.cook_time import (
    apply_smoker_profile,
    base_cook_time,
    estimate_cook_time,
    is_stall_prone,
    stall_duration,
)
from smoke_engine.math.environment import environmental_multiplier
from smoke_engine.models.cook_input import CookPlanInput
from smoke_engine.models.cook_plan import DurationRange
from smoke_engine.models.enums import MeatCut, SmokerType, WrapMethod


class TestBaseCookTime:
    def test_per_pound_scales_with_weight(self) -> None:
        """Brisket: 60-90 min/lb."""
        assert base_cook_time(MeatCut.BRISKET, 12.0) == DurationRange(720.0, 1080.0)

    def test_flat_total_ignores_weight(self) -> None:
        assert base_cook_time(MeatCut.SPARE_RIBS, 2.0) == base_cook_time(MeatCut.SPARE_RIBS, 6.0)
        assert base_cook_time(MeatCut.BEEF_RIBS, 4.0) == DurationRange(360.0, 480.0)


class TestApplySmokerProfile:
    def test_electric_is_baseline(self) -> None:
        base = DurationRange(600.0, 900.0)
        assert apply_smoker_profile(base, SmokerType.ELECTRIC) == base

    def test_mean_shift_moves_midpoint(self) -> None:
        """Offset mean multiplier 1.15 shifts the midpoint by 15%."""
        base = DurationRange(600.0, 900.0)
        adjusted = apply_smoker_profile(base, SmokerType.OFFSET)
        assert adjusted.midpoint == pytest.approx(base.midpoint * 1.15)

    def test_high_variance_widens_spread(self) -> None:
        base = DurationRange(600.0, 900.0)
        adjusted = apply_smoker_profile(base, SmokerType.OFFSET)
        assert adjusted.spread == pytest.approx(300.0 * 1.15 * 1.3)

    def test_low_variance_narrows_spread(self) -> None:
        base = DurationRange(600.0, 900.0)
        adjusted = apply_smoker_profile(base, SmokerType.PELLET)
        assert adjusted.spread == pytest.approx(300.0 * 0.9 * 0.8)
        assert adjusted.midpoint == pytest.approx(750.0 * 0.9)


class TestEstimateCookTime:
    def test_brisket_on_pellet(self, brisket_input: CookPlanInput) -> None:
        """720-1080 → x0.9 → 648-972 → spread x0.8 about 810 → 680-940."""
        estimate = estimate_cook_time(brisket_input)
        assert estimate.cook_time == DurationRange(680, 940)
        assert estimate.environmental_multiplier == 1.0

    def test_cold_day_lengthens(self, brisket_input: CookPlanInput) -> None:
        cold = dataclasses.replace(brisket_input, ambient_temp_f=20.0)
        base = estimate_cook_time(brisket_input).cook_time
        adjusted = estimate_cook_time(cold).cook_time
        assert adjusted.min_minutes > base.min_minutes
        assert adjusted.max_minutes > base.max_minutes

    def test_environment_multiplier_recorded(self, brisket_input: CookPlanInput) -> None:
        cold_high = dataclasses.replace(brisket_input, ambient_temp_f=20.0, altitude_ft=8000.0)
        estimate = estimate_cook_time(cold_high)
        multiplier = environmental_multiplier(20.0, 8000.0)
        profiled = apply_smoker_profile(
            base_cook_time(MeatCut.BRISKET, 12.0), SmokerType.PELLET
        )
        assert estimate.environmental_multiplier == pytest.approx(multiplier)
        assert estimate.cook_time == profiled.scaled(multiplier)

    def test_adjustments_explain_factors(self, brisket_input: CookPlanInput) -> None:
        hot_high = dataclasses.replace(brisket_input, ambient_temp_f=100.0, altitude_ft=6000.0)
        adjustments = estimate_cook_time(hot_high).adjustments
        assert len(adjustments) == 3
        assert adjustments[0].startswith("Pellet smoker")

    def test_electric_mild_day_has_no_adjustments(self, brisket_input: CookPlanInput) -> None:
        electric = dataclasses.replace(brisket_input, smoker_type=SmokerType.ELECTRIC)
        assert estimate_cook_time(electric).adjustments == ()

    @pytest.mark.parametrize("weight", [0.5, 30.0])
    @pytest.mark.parametrize("smoker", list(SmokerType))
    def test_validation_boundaries_stay_positive(
        self, brisket_input: CookPlanInput, weight: float, smoker: SmokerType
    ) -> None:
        extreme = dataclasses.replace(
            brisket_input, weight_lbs=weight, smoker_type=smoker,
            ambient_temp_f=120.0, altitude_ft=15000.0,
        )
        cook_time = estimate_cook_time(extreme).cook_time
        assert 0 < cook_time.min_minutes <= cook_time.max_minutes


class TestStallDuration:
    def test_stall_prone_cuts(self) -> None:
        assert is_stall_prone(MeatCut.BRISKET)
        assert is_stall_prone(MeatCut.PORK_SHOULDER)
        assert not is_stall_prone(MeatCut.BABY_BACK_RIBS)

    def test_unwrapped_stall(self) -> None:
        assert stall_duration(MeatCut.BRISKET, WrapMethod.NONE) == DurationRange(60, 240)

    @pytest.mark.parametrize("wrap", [WrapMethod.BUTCHER_PAPER, WrapMethod.FOIL])
    def test_wrapping_halves_stall(self, wrap: WrapMethod) -> None:
        assert stall_duration(MeatCut.PORK_SHOULDER, wrap) == DurationRange(30, 120)

    def test_ribs_have_no_stall(self) -> None:
        assert stall_duration(MeatCut.SPARE_RIBS, WrapMethod.FOIL) is None
