"""
Confidence scoring for speed-variation wind estimates.

The score starts from a neutral base, gains for directional coverage and
sample density, loses for weak or noisy signals, and is then scaled by how
well the data fits the trim-speed model.
"""

import logging

from core.constants import (
    MIN_DIRECTION_COVERAGE, MIN_TRACK_POINTS, BASE_CONFIDENCE,
    COVERAGE_BONUS_PER_DIRECTION, MAX_COVERAGE_BONUS,
    SEGMENT_BONUS_DIVISOR, MAX_SEGMENT_BONUS,
    WEAK_SIGNAL_SPEED_DIFFERENCE_MS, WEAK_SIGNAL_PENALTY,
    NOISY_VARIANCE_THRESHOLD, NOISY_VARIANCE_PENALTY,
    MIN_HEURISTIC_CONFIDENCE, MAX_CONFIDENCE,
    TRIM_DELTA_THRESHOLD_MS, TRIM_DELTA_FACTOR,
    FULL_PROFILE_FACTOR, MISSING_WEIGHT_FACTOR,
    PLAUSIBILITY_MARGIN_MS, PLAUSIBILITY_RATIO, IMPLAUSIBLE_DATA_FACTOR
)

logger = logging.getLogger(__name__)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def calculate_data_confidence(
    directions_with_data: int,
    total_segments: int,
    speed_difference: float,
    variance: float
) -> float:
    """
    Score the raw data quality.

    Args:
        directions_with_data: Octants with enough samples
        total_segments: Number of flight segments
        speed_difference: Fastest minus slowest octant median, m/s
        variance: Ground speed variance over all segments, (m/s)²

    Returns:
        Score clamped to [0.1, 1.0]
    """
    confidence = BASE_CONFIDENCE

    # Coverage beyond the minimum (max +0.3)
    coverage_bonus = (directions_with_data - MIN_DIRECTION_COVERAGE) * COVERAGE_BONUS_PER_DIRECTION
    confidence += min(MAX_COVERAGE_BONUS, coverage_bonus)

    # Sample density beyond the minimum (max +0.2)
    segment_bonus = (total_segments - MIN_TRACK_POINTS) / SEGMENT_BONUS_DIVISOR
    confidence += min(MAX_SEGMENT_BONUS, segment_bonus)

    if speed_difference < WEAK_SIGNAL_SPEED_DIFFERENCE_MS:
        confidence -= WEAK_SIGNAL_PENALTY

    if variance > NOISY_VARIANCE_THRESHOLD:
        confidence -= NOISY_VARIANCE_PENALTY

    return clamp(confidence, MIN_HEURISTIC_CONFIDENCE, MAX_CONFIDENCE)


def calculate_confidence(
    directions_with_data: int,
    total_segments: int,
    speed_difference: float,
    variance: float,
    trim_delta: float,
    has_pilot_weight: bool,
    has_wing_size: bool,
    max_median_speed: float,
    expected_airspeed: float,
    wind_speed: float
) -> float:
    """
    Combine data quality and model fit into a single confidence score.

    Args:
        directions_with_data: Octants with enough samples
        total_segments: Number of flight segments
        speed_difference: Fastest minus slowest octant median, m/s
        variance: Ground speed variance over all segments, (m/s)²
        trim_delta: Distance between estimated and expected airspeed, m/s
        has_pilot_weight: Whether a pilot weight was supplied
        has_wing_size: Whether a wing size was supplied
        max_median_speed: Fastest octant median, m/s
        expected_airspeed: Trim airspeed baseline, m/s
        wind_speed: Solved wind speed, m/s

    Returns:
        Confidence in [0, 1]
    """
    confidence = calculate_data_confidence(
        directions_with_data, total_segments, speed_difference, variance
    )

    # Estimated airspeed far from trim means a poor model fit
    if trim_delta > TRIM_DELTA_THRESHOLD_MS:
        confidence *= TRIM_DELTA_FACTOR

    if has_pilot_weight and has_wing_size:
        confidence *= FULL_PROFILE_FACTOR
    elif not has_pilot_weight:
        confidence *= MISSING_WEIGHT_FACTOR

    # Ground speed beyond any reasonable airspeed + wind means corrupted data
    max_expected_ground_speed = expected_airspeed + wind_speed + PLAUSIBILITY_MARGIN_MS
    if max_median_speed > max_expected_ground_speed * PLAUSIBILITY_RATIO:
        logger.warning(f"Implausible ground speed {max_median_speed:.1f} m/s "
                       f"(expected at most {max_expected_ground_speed:.1f} m/s)")
        confidence *= IMPLAUSIBLE_DATA_FACTOR

    return clamp(confidence, 0.0, MAX_CONFIDENCE)
