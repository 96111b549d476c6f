"""Environment-variable-based configuration for the smoke-plan command."""

from __future__ import annotations

import os
from pathlib import Path


def _optional_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


LOG_LEVEL: str = os.environ.get("SMOKE_LOG_LEVEL", "INFO").upper()
DEFAULT_SMOKER: str = os.environ.get("SMOKE_DEFAULT_SMOKER", "PELLET").upper()
DEFAULT_SMOKER_TEMP_F: float = float(os.environ.get("SMOKE_DEFAULT_SMOKER_TEMP_F", "225"))
AMBIENT_TEMP_F: float | None = _optional_float("SMOKE_AMBIENT_TEMP_F")
ALTITUDE_FT: float | None = _optional_float("SMOKE_ALTITUDE_FT")
HISTORY_PATH: Path = Path(
    os.environ.get("SMOKE_HISTORY_PATH", "~/.smoke_engine/history.json")
).expanduser()
