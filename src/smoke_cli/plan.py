"""smoke-plan — plan a cook, refresh a live prediction, or review accuracy.

Usage:
    smoke-plan plan --cut brisket --weight 12 --serve 2026-10-18T18:00:00+00:00
    smoke-plan update --plan-file plan.json --current 165 --elapsed 360
    smoke-plan accuracy --history ~/.smoke_engine/history.json
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Callable, Sequence

from smoke_cli.config import (
    ALTITUDE_FT,
    AMBIENT_TEMP_F,
    DEFAULT_SMOKER,
    DEFAULT_SMOKER_TEMP_F,
    HISTORY_PATH,
    LOG_LEVEL,
)
from smoke_engine.exceptions import PlanFormatError, SmokeEngineError
from smoke_engine.math.calibration import (
    FinishRecord,
    calibrate_variance_fraction,
    prediction_accuracy_minutes,
)
from smoke_engine.math.confidence import confidence_level
from smoke_engine.models.cook_input import CookPlanInput
from smoke_engine.models.cook_plan import CookPlan
from smoke_engine.models.enums import MeatCut, SmokerType, WrapMethod
from smoke_engine.planner import generate_plan
from smoke_engine.prediction import update_prediction
from smoke_engine.serialization import (
    plan_from_dict,
    prediction_to_dict,
    require_consistent_timezones,
    to_json_string,
)
from smoke_engine.validation import default_target_temp, validate_plan_input, validate_reading

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def _enum_arg(enum_type: type[IntEnum]) -> Callable[[str], IntEnum]:
    """argparse type converter: 'baby-back-ribs' -> MeatCut.BABY_BACK_RIBS."""

    def convert(value: str) -> IntEnum:
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return enum_type[key]
        except KeyError:
            choices = ", ".join(m.name.lower() for m in enum_type)
            raise argparse.ArgumentTypeError(
                f"invalid {enum_type.__name__} {value!r} (choose from {choices})"
            ) from None

    convert.__name__ = enum_type.__name__
    return convert


def _instant_arg(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO-8601 time {value!r}") from None


def _format_plan(plan: CookPlan) -> str:
    """Render a plan as a plain-text timeline."""
    lines = []
    for phase in plan.phases:
        span = phase.duration_range
        if phase.is_instant:
            duration = "decision point"
        else:
            duration = f"{span.min_minutes:g}-{span.max_minutes:g} min"
        lines.append(
            f"{phase.start_time:%a %H:%M}  {phase.name.label:<15} "
            f"{duration:<16} [{phase.confidence.name}] {phase.notes}"
        )

    level = confidence_level(plan.overall_confidence)
    lines.append("")
    lines.append(f"Start by:  {plan.recommended_start_time:%a %H:%M}")
    lines.append(
        f"Finish:    {plan.predicted_finish_time:%a %H:%M} "
        f"(between {plan.confidence_range.earliest:%a %H:%M} "
        f"and {plan.confidence_range.latest:%a %H:%M})"
    )
    lines.append(f"Confidence: {plan.overall_confidence}% ({level.name})")
    for note in plan.adjustments:
        lines.append(f"  * {note}")
    return "\n".join(lines)


def _load_plan(path: Path) -> CookPlan:
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise PlanFormatError(f"{path} is not valid JSON: {exc}") from exc
    return plan_from_dict(data)


def _load_history(path: Path) -> list[FinishRecord]:
    with open(path) as f:
        try:
            rows = json.load(f)
        except json.JSONDecodeError as exc:
            raise PlanFormatError(f"{path} is not valid JSON: {exc}") from exc
    try:
        records = [
            FinishRecord(
                predicted_finish=datetime.fromisoformat(row["predicted"]),
                actual_finish=datetime.fromisoformat(row["actual"]),
                variance_minutes=float(row.get("variance_minutes", 0.0)),
            )
            for row in rows
        ]
    except (KeyError, TypeError, ValueError) as exc:
        raise PlanFormatError(f"Malformed history record in {path}: {exc!r}") from exc

    for index, record in enumerate(records):
        require_consistent_timezones(
            (record.predicted_finish, record.actual_finish),
            f"History record {index} in {path}",
        )
    return records


def run_plan(args: argparse.Namespace) -> int:
    cook_input = validate_plan_input(
        CookPlanInput(
            meat_cut=args.cut,
            weight_lbs=args.weight,
            smoker_type=args.smoker,
            smoker_temp_f=args.smoker_temp,
            serve_time=args.serve,
            wrap_method=args.wrap,
            ambient_temp_f=args.ambient,
            altitude_ft=args.altitude,
        )
    )
    plan = generate_plan(cook_input)
    logger.info(
        "Generated %d-phase plan for %s, finish %s",
        len(plan.phases),
        cook_input.meat_cut.name,
        plan.predicted_finish_time.isoformat(),
    )
    print(to_json_string(plan) if args.json else _format_plan(plan))
    return EXIT_OK


def run_update(args: argparse.Namespace) -> int:
    plan = _load_plan(args.plan_file)
    if args.target is not None:
        target = args.target
    elif args.cut is not None:
        target = default_target_temp(args.cut)
    else:
        target = default_target_temp(MeatCut.BRISKET)
        logger.warning("No --target or --cut given, assuming %g°F", target)

    validate_reading(plan, args.current, args.elapsed, target)
    update = update_prediction(plan, args.current, args.elapsed, target)
    logger.info("Prediction %s, confidence %d", update.status.key, update.adjusted_confidence)

    if args.json:
        print(json.dumps(prediction_to_dict(update), indent=2))
    else:
        print(f"Status:     {update.status.key}")
        print(f"Finish:     {update.updated_finish_time:%a %H:%M} ({update.adjustment_minutes:+d} min)")
        print(f"Confidence: {update.adjusted_confidence}%")
    return EXIT_OK


def run_accuracy(args: argparse.Namespace) -> int:
    records = _load_history(args.history)
    accuracy = prediction_accuracy_minutes(records)
    fraction = calibrate_variance_fraction(records, coverage=args.coverage)
    print(f"Cooks:              {len(records)}")
    print(f"Mean finish error:  {accuracy} min")
    if fraction is None:
        print("Variance fraction:  not enough data")
    else:
        print(f"Variance fraction:  {fraction:.2f} for {args.coverage:.0%} coverage")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smoke-plan", description="Plan and track low-and-slow cooks"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    plan = sub.add_parser("plan", help="Generate a cook plan")
    plan.add_argument("--cut", type=_enum_arg(MeatCut), required=True)
    plan.add_argument("--weight", type=float, required=True, help="Weight in lbs")
    plan.add_argument("--serve", type=_instant_arg, required=True, help="ISO-8601 serve time")
    plan.add_argument("--smoker", type=_enum_arg(SmokerType), default=DEFAULT_SMOKER)
    plan.add_argument("--smoker-temp", type=float, default=DEFAULT_SMOKER_TEMP_F)
    plan.add_argument("--wrap", type=_enum_arg(WrapMethod), default=WrapMethod.NONE)
    plan.add_argument("--ambient", type=float, default=AMBIENT_TEMP_F, help="Ambient °F")
    plan.add_argument("--altitude", type=float, default=ALTITUDE_FT, help="Altitude in feet")
    plan.add_argument("--json", action="store_true", help="Print the plan as JSON")
    plan.set_defaults(handler=run_plan)

    update = sub.add_parser("update", help="Refresh a prediction from a temperature reading")
    update.add_argument("--plan-file", type=Path, required=True)
    update.add_argument("--current", type=float, required=True, help="Internal temp °F")
    update.add_argument("--elapsed", type=float, required=True, help="Minutes since start")
    update.add_argument("--target", type=float, default=None, help="Pull temp °F")
    update.add_argument("--cut", type=_enum_arg(MeatCut), default=None)
    update.add_argument("--json", action="store_true")
    update.set_defaults(handler=run_update)

    accuracy = sub.add_parser("accuracy", help="Review prediction accuracy")
    accuracy.add_argument("--history", type=Path, default=HISTORY_PATH)
    accuracy.add_argument("--coverage", type=float, default=0.8)
    accuracy.set_defaults(handler=run_accuracy)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (SmokeEngineError, ValueError) as exc:
        logger.error("%s", exc)
        return EXIT_INVALID
    except FileNotFoundError as exc:
        logger.error("File not found: %s", exc.filename)
        return EXIT_INVALID


if __name__ == "__main__":
    raise SystemExit(main())
