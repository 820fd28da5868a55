"""
Constants for the Wind Lab application.

This module contains all the mathematical, algorithmic, and domain-specific
constants used throughout the codebase. Constants are grouped by their purpose
and documented with their units where applicable.
"""

# =============================================================================
# CONVERSION FACTORS
# =============================================================================

# Speed conversions
METERS_PER_SECOND_TO_KNOTS = 1.94384  # 1 m/s = 1.94384 knots
KNOTS_TO_METERS_PER_SECOND = 1 / METERS_PER_SECOND_TO_KNOTS
METERS_PER_SECOND_TO_KMH = 3.6  # 1 m/s = 3.6 km/h
KMH_TO_METERS_PER_SECOND = 1 / METERS_PER_SECOND_TO_KMH

# Distance conversions
METERS_PER_KILOMETER = 1000

# =============================================================================
# ANGLE CONSTANTS (all in degrees)
# =============================================================================

FULL_CIRCLE_DEGREES = 360
HALF_CIRCLE_DEGREES = 180  # Offset between tailwind heading and wind origin

# Compass octants (N, NE, E, SE, S, SW, W, NW)
OCTANT_COUNT = 8
OCTANT_WIDTH_DEGREES = FULL_CIRCLE_DEGREES / OCTANT_COUNT  # 45°
OCTANT_CENTER_OFFSET_DEGREES = OCTANT_WIDTH_DEGREES / 2  # 22.5°, centers buckets on compass points
OCTANT_LABELS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

# =============================================================================
# TRACK VALIDATION THRESHOLDS
# =============================================================================

MIN_TRACK_POINTS = 12  # ~1 minute at typical sample rate
MIN_VALID_SPEED_MS = 0.0  # Exclusive lower bound for a recorded ground speed
MAX_VALID_SPEED_MS = 50.0  # Exclusive upper bound (180 km/h), above is GPS noise

# =============================================================================
# SEGMENT THRESHOLDS
# =============================================================================

MIN_SEGMENT_SPEED_MS = 0.5  # Near-stationary below this, heading is noise
MAX_SEGMENT_DURATION_SECONDS = 30.0  # Longer gaps are missing data

# =============================================================================
# DIRECTIONAL COVERAGE
# =============================================================================

MIN_DIRECTION_COVERAGE = 3  # Octants needed to infer wind (out of 8)
MIN_SAMPLES_PER_DIRECTION = 2  # Samples needed for an octant to count

# =============================================================================
# TRIM SPEED MODEL
# =============================================================================

# Hands-up trim speed per wing category (km/h)
TRIM_SPEEDS_KMH = {
    "Soaring": 36.0,
    "Cross": 40.0,
    "Thermal": 38.0,
    "Speedflying": 50.0,
    "Acro": 42.0,
}
DEFAULT_TRIM_SPEED_KMH = 37.0

REFERENCE_WING_LOADING = 5.0  # kg/m², typical range 4.5-5.5
TRIM_ADJUSTMENT_PER_LOADING_UNIT = 0.03  # +/- 3% trim speed per kg/m² of deviation

# =============================================================================
# WIND SOLVER PARAMETERS
# =============================================================================

STD_DEV_UNCERTAINTY_FACTOR = 0.5  # Share of ground-speed std dev added to the range
TRIM_UNCERTAINTY_FACTOR = 0.3  # Share of trim deviation added to the range

# Below this the speed split is within GPS noise (3.6 km/h)
MIN_RESOLVABLE_WIND_MS = 1.0
UNRESOLVED_WIND_SPEED_MAX_MS = 2.0
UNRESOLVED_WIND_CONFIDENCE = 0.3

SPEED_VARIATION_METHOD = "speed_variation"

# =============================================================================
# CONFIDENCE SCORING
# =============================================================================

BASE_CONFIDENCE = 0.5

COVERAGE_BONUS_PER_DIRECTION = 0.1
MAX_COVERAGE_BONUS = 0.3
SEGMENT_BONUS_DIVISOR = 100.0
MAX_SEGMENT_BONUS = 0.2

WEAK_SIGNAL_SPEED_DIFFERENCE_MS = 3.0  # ~10 km/h between fastest and slowest octant
WEAK_SIGNAL_PENALTY = 0.2
NOISY_VARIANCE_THRESHOLD = 25.0  # std dev > 5 m/s
NOISY_VARIANCE_PENALTY = 0.15

MIN_HEURISTIC_CONFIDENCE = 0.1
MAX_CONFIDENCE = 1.0

TRIM_DELTA_THRESHOLD_MS = 3.0
TRIM_DELTA_FACTOR = 0.8
FULL_PROFILE_FACTOR = 1.1  # Wing size and pilot weight both known
MISSING_WEIGHT_FACTOR = 0.9

PLAUSIBILITY_MARGIN_MS = 5.0
PLAUSIBILITY_RATIO = 1.5
IMPLAUSIBLE_DATA_FACTOR = 0.7

# Confidence labels
RELIABLE_CONFIDENCE_THRESHOLD = 0.7
APPROXIMATE_CONFIDENCE_THRESHOLD = 0.4

# =============================================================================
# VALIDATION
# =============================================================================

assert MIN_DIRECTION_COVERAGE <= OCTANT_COUNT, \
    "Direction coverage cannot exceed the number of octants"
assert len(OCTANT_LABELS) == OCTANT_COUNT, "One label per octant"
assert APPROXIMATE_CONFIDENCE_THRESHOLD < RELIABLE_CONFIDENCE_THRESHOLD, \
    "Confidence label thresholds must be ordered"
