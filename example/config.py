"""Environment-variable-based configuration for the example driver and dashboard."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.environ.get("TENNIS_LOG_LEVEL", "INFO").upper()
DEFAULT_INTENSITY: int = int(os.environ.get("TENNIS_DEFAULT_INTENSITY", "3"))
