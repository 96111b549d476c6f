"""Enumerations and lookup tables for the smoke engine.

Cook-time figures are pit-tested rules of thumb for low-and-slow cooking at
225-250°F. They are static configuration, never mutated at runtime.
"""

from enum import IntEnum, auto


class MeatCut(IntEnum):
    """Cuts the planner knows how to schedule."""

    BRISKET = auto()
    PORK_SHOULDER = auto()
    SPARE_RIBS = auto()
    BABY_BACK_RIBS = auto()
    BEEF_RIBS = auto()


class SmokerType(IntEnum):
    """Smoker families with distinct heat-retention behaviour."""

    PELLET = auto()
    OFFSET = auto()
    KAMADO = auto()
    ELECTRIC = auto()
    KETTLE = auto()


class WrapMethod(IntEnum):
    """Texas-crutch options for pushing through the stall."""

    NONE = auto()
    BUTCHER_PAPER = auto()
    FOIL = auto()

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


class Confidence(IntEnum):
    """Coarse predictability label for a phase or a whole plan."""

    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


class PhaseName(IntEnum):
    """Cook phases in chronological order."""

    PREP = auto()
    PREHEAT = auto()
    SMOKE_1 = auto()
    STALL = auto()
    WRAP_DECISION = auto()
    SMOKE_2 = auto()
    REST = auto()
    SERVE = auto()

    @property
    def label(self) -> str:
        return PHASE_LABELS[self]


class PredictionStatus(IntEnum):
    """How a live cook compares with its plan."""

    AHEAD = auto()
    ON_TRACK = auto()
    BEHIND = auto()

    @property
    def key(self) -> str:
        return self.name.lower()


PHASE_LABELS = {
    PhaseName.PREP: "Prep & Trim",
    PhaseName.PREHEAT: "Preheat Smoker",
    PhaseName.SMOKE_1: "Smoke Phase 1",
    PhaseName.STALL: "Stall Window",
    PhaseName.WRAP_DECISION: "Wrap Decision",
    PhaseName.SMOKE_2: "Smoke Phase 2",
    PhaseName.REST: "Rest",
    PhaseName.SERVE: "Serve Window",
}

# ---------------------------------------------------------------------------
# Cook time tables
# ---------------------------------------------------------------------------

# (min, max, per_pound) in minutes. Per-pound rows scale with weight;
# rib rows are whole-rack totals.
BASE_COOK_TIMES: dict[MeatCut, tuple[float, float, bool]] = {
    MeatCut.BRISKET: (60.0, 90.0, True),         # 1-1.5 h/lb
    MeatCut.PORK_SHOULDER: (90.0, 120.0, True),  # 1.5-2 h/lb
    MeatCut.SPARE_RIBS: (300.0, 360.0, False),   # 5-6 h total
    MeatCut.BABY_BACK_RIBS: (240.0, 300.0, False),  # 4-5 h total
    MeatCut.BEEF_RIBS: (360.0, 480.0, False),    # 6-8 h total
}

# Pull temperatures (°F) used when the cook does not name one
DEFAULT_TARGET_TEMPS_F: dict[MeatCut, float] = {
    MeatCut.BRISKET: 203.0,
    MeatCut.PORK_SHOULDER: 205.0,
    MeatCut.SPARE_RIBS: 195.0,
    MeatCut.BABY_BACK_RIBS: 195.0,
    MeatCut.BEEF_RIBS: 203.0,
}

# (mean multiplier, variance multiplier). Mean < 1.0 cooks faster;
# variance > 1.0 widens the min-max spread around its midpoint.
SMOKER_MULTIPLIERS: dict[SmokerType, tuple[float, float]] = {
    SmokerType.PELLET: (0.90, 0.80),    # PID controlled, very steady
    SmokerType.OFFSET: (1.15, 1.30),    # fire management swings pit temp
    SmokerType.KAMADO: (0.95, 0.85),    # ceramic mass, efficient
    SmokerType.ELECTRIC: (1.00, 1.00),  # baseline
    SmokerType.KETTLE: (1.10, 1.20),    # thin walls, little insulation
}

# ---------------------------------------------------------------------------
# Stall configuration
# ---------------------------------------------------------------------------
# Evaporative cooling plateau on large collagen-rich cuts
STALL_START_TEMP_F = 150
STALL_END_TEMP_F = 170
STALL_DURATION_MINUTES = (60.0, 240.0)
STALL_WRAP_REDUCTION_FACTOR = 0.5
STALL_AFFECTED_CUTS = frozenset({
    MeatCut.BRISKET,
    MeatCut.PORK_SHOULDER,
})

# Share of the cook-time range spent either side of the stall. The remainder
# is covered by the stall window's own duration.
SMOKE_1_FRACTION = 0.4
SMOKE_2_FRACTION = 0.3

# Smoke phases never collapse below this many minutes
MIN_SMOKE_PHASE_MINUTES = 1

# ---------------------------------------------------------------------------
# Environmental factors
# ---------------------------------------------------------------------------
COLD_AMBIENT_THRESHOLD_F = 40.0   # below: longer cook
HOT_AMBIENT_THRESHOLD_F = 90.0    # above: shorter cook
HIGH_ALTITUDE_THRESHOLD_FT = 5000.0  # above: longer cook (lower boiling point)

COLD_AMBIENT_MULTIPLIER = 1.12   # +12%
HOT_AMBIENT_MULTIPLIER = 0.92    # -8%
HIGH_ALTITUDE_MULTIPLIER = 1.10  # +10%

# ---------------------------------------------------------------------------
# Fixed phase durations (minutes)
# ---------------------------------------------------------------------------
PREP_TIME_MINUTES = (30.0, 45.0)
PREHEAT_TIME_MINUTES = (15.0, 30.0)
REST_TIME_MINUTES: dict[MeatCut, tuple[float, float]] = {
    MeatCut.BRISKET: (60.0, 120.0),
    MeatCut.PORK_SHOULDER: (45.0, 90.0),
    MeatCut.SPARE_RIBS: (10.0, 20.0),
    MeatCut.BABY_BACK_RIBS: (10.0, 15.0),
    MeatCut.BEEF_RIBS: (30.0, 60.0),
}

# Serve tolerance either side of the requested serve time
SERVE_WINDOW_MINUTES = 30

# ---------------------------------------------------------------------------
# Confidence scoring
# ---------------------------------------------------------------------------
PHASE_CONFIDENCE: dict[PhaseName, Confidence] = {
    PhaseName.PREP: Confidence.HIGH,
    PhaseName.PREHEAT: Confidence.HIGH,
    PhaseName.SMOKE_1: Confidence.MEDIUM,
    PhaseName.STALL: Confidence.LOW,
    PhaseName.WRAP_DECISION: Confidence.MEDIUM,
    PhaseName.SMOKE_2: Confidence.MEDIUM,
    PhaseName.REST: Confidence.HIGH,
    PhaseName.SERVE: Confidence.HIGH,
}

CONFIDENCE_BASE_SCORE = 100
CONFIDENCE_VARIANCE_PENALTY = 50  # points per unit of variance multiplier above 1.0
CONFIDENCE_LOW_PHASE_PENALTY = 10
CONFIDENCE_MEDIUM_PHASE_PENALTY = 5
CONFIDENCE_MIN_SCORE = 20
CONFIDENCE_MAX_SCORE = 100

CONFIDENCE_HIGH_THRESHOLD = 70    # >= 70 → HIGH
CONFIDENCE_MEDIUM_THRESHOLD = 40  # >= 40 → MEDIUM, else LOW

# Share of total variance minutes placed either side of the predicted finish.
# Uncalibrated; see math.calibration.calibrate_variance_fraction.
CONFIDENCE_RANGE_VARIANCE_FRACTION = 0.5

# ---------------------------------------------------------------------------
# Live prediction
# ---------------------------------------------------------------------------
PREDICTION_TOLERANCE = 0.10          # ±10% relative to expected progress
PREDICTION_ADJUSTMENT_WEIGHT = 0.3   # share of the progress gap applied
PREDICTION_MAX_CONFIDENCE_PENALTY = 30

# ---------------------------------------------------------------------------
# Boundary validation ranges (inclusive)
# ---------------------------------------------------------------------------
VALIDATION_RANGES: dict[str, tuple[float, float]] = {
    "weight_lbs": (0.5, 30.0),
    "smoker_temp_f": (175.0, 400.0),
    "internal_temp_f": (32.0, 220.0),
    "target_temp_f": (150.0, 220.0),
    "ambient_temp_f": (-20.0, 120.0),
    "altitude_ft": (0.0, 15000.0),
    "humidity_pct": (0.0, 100.0),
    "elapsed_minutes": (0.0, 4320.0),  # three days
}
