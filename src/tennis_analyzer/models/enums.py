"""Enumerations and analysis constants for the tennis session analyzer."""

from enum import Enum, IntEnum


class Intensity(IntEnum):
    """Per-set effort rating on a 1-5 scale."""

    VERY_LOW = 1
    LOW = 2
    MODERATE = 3
    HIGH = 4
    VERY_HIGH = 5


class SetType(Enum):
    """Kind of training set recorded on court."""

    RALLY = "Rally"
    SERVE = "Serve"
    DRILL = "Drill"

    @property
    def display_name(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Input validation bounds
# ---------------------------------------------------------------------------
MIN_DURATION_S = 0.0
MAX_DURATION_S = 86400.0  # 24 hours
MIN_INTENSITY = int(Intensity.VERY_LOW)
MAX_INTENSITY = int(Intensity.VERY_HIGH)

# Completed sets shorter than this are treated as accidental taps
MIN_SET_DURATION_S = 1.0

# Session notes cap (characters)
MAX_NOTES_LENGTH = 5000

# Floating-point tolerance for "zero" rest and near-zero means
EPSILON = 1e-9

# ---------------------------------------------------------------------------
# Consistency score weights (must sum to 1.0)
# ---------------------------------------------------------------------------
CONSISTENCY_WEIGHT_DURATION = 0.6  # Timing regularity dominates
CONSISTENCY_WEIGHT_INTENSITY = 0.4

# ---------------------------------------------------------------------------
# Training density constants
# ---------------------------------------------------------------------------
DENSITY_WEIGHT_INTENSITY = 0.4
DENSITY_WEIGHT_VOLUME = 0.4
DENSITY_WEIGHT_DURATION = 0.2

# Reference ceiling: one hour per set at maximum intensity
DENSITY_REFERENCE_SET_S = 3600.0

# Average set length below which a set is too short to register as stimulus
DENSITY_SHORT_SET_S = 30.0
# Average set length above which fatigue starts to dilute density
DENSITY_LONG_SET_S = 1800.0

# Gap substituted for overlapping or back-to-back sets when deriving rest
MIN_REST_GAP_S = 1.0
