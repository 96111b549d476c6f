"""Shared test fixtures: cook inputs, serve times and generated plans."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from smoke_engine.models.cook_input import CookPlanInput
from smoke_engine.models.cook_plan import CookPlan
from smoke_engine.models.enums import MeatCut, SmokerType, WrapMethod
from smoke_engine.planner import generate_plan


@pytest.fixture
def serve_time() -> datetime:
    """Saturday 6 pm UTC."""
    return datetime(2026, 10, 17, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def brisket_input(serve_time: datetime) -> CookPlanInput:
    """12 lb packer brisket, pellet at 225°F, unwrapped, mild day at sea level."""
    return CookPlanInput(
        meat_cut=MeatCut.BRISKET,
        weight_lbs=12.0,
        smoker_type=SmokerType.PELLET,
        smoker_temp_f=225.0,
        serve_time=serve_time,
        wrap_method=WrapMethod.NONE,
        ambient_temp_f=70.0,
        altitude_ft=0.0,
    )


@pytest.fixture
def wrapped_brisket_input(serve_time: datetime) -> CookPlanInput:
    """Same brisket, wrapped in butcher paper at the stall."""
    return CookPlanInput(
        meat_cut=MeatCut.BRISKET,
        weight_lbs=12.0,
        smoker_type=SmokerType.PELLET,
        smoker_temp_f=225.0,
        serve_time=serve_time,
        wrap_method=WrapMethod.BUTCHER_PAPER,
        ambient_temp_f=70.0,
        altitude_ft=0.0,
    )


@pytest.fixture
def baby_back_input(serve_time: datetime) -> CookPlanInput:
    """Two racks of baby backs on a kettle, foil wrapped."""
    return CookPlanInput(
        meat_cut=MeatCut.BABY_BACK_RIBS,
        weight_lbs=3.0,
        smoker_type=SmokerType.KETTLE,
        smoker_temp_f=250.0,
        serve_time=serve_time,
        wrap_method=WrapMethod.FOIL,
    )


@pytest.fixture
def brisket_plan(brisket_input: CookPlanInput) -> CookPlan:
    """Plan for the 12 lb brisket.

    Start T-1123 min, finish T-150 min, range T-370..T+70, confidence 90.
    """
    return generate_plan(brisket_input)
