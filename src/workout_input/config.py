"""Environment-variable-based configuration for workout input handling."""

from __future__ import annotations

import os

MAX_LENGTH: int = int(os.environ.get("WORKOUT_MAX_LENGTH", "500"))
MAX_NESTING: int = int(os.environ.get("WORKOUT_MAX_NESTING", "8"))
LOG_LEVEL: str = os.environ.get("WORKOUT_LOG_LEVEL", "INFO").upper()
