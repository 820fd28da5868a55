"""
Wind estimation algorithms.

This module contains the speed-variation wind estimator: it reads a completed
flight's GPS track and infers the wind from how ground speed changes with
heading. Each stage lives in its own module; this one wires them together
and decides when there is not enough data to answer.
"""

import logging
from typing import Optional, Sequence

from core.constants import MIN_TRACK_POINTS, SPEED_VARIATION_METHOD
from core.filtering import filter_valid_points, has_minimum_samples
from core.models.track import GPSTrackPoint
from core.segments import build_segments
from core.wind.aggregation import aggregate_by_octant
from core.wind.confidence import calculate_confidence
from core.wind.models import WindEstimation
from core.wind.solver import solve_wind, is_below_resolution
from core.wind.trim import expected_airspeed

logger = logging.getLogger(__name__)


def estimate_wind_from_speed_variation(
    track: Sequence[GPSTrackPoint],
    wing_type: Optional[str] = None,
    wing_size: Optional[float] = None,
    pilot_weight: Optional[float] = None
) -> Optional[WindEstimation]:
    """
    Estimate the wind from ground speed variation by heading.

    The algorithm:
    1. Rejects tracks with fewer than 12 samples, before and after dropping
       samples without a valid speed
    2. Builds per-step segments (heading, ground speed)
    3. Buckets segments into 8 compass octants and takes the median speed of
       each; at least 3 octants need 2+ samples
    4. Resolves the expected trim airspeed from wing type and loading
    5. Solves wind speed from the fastest/slowest octant medians and wind
       direction as the opposite of the fastest heading
    6. Scores confidence from coverage, density, signal, noise and model fit

    Args:
        track: Chronologically ordered GPS samples of one flight
        wing_type: Wing category key, unknown values use the default trim
        wing_size: Projected wing area in m²
        pilot_weight: Pilot weight in kg

    Returns:
        WindEstimation, or None when the track cannot support an estimate
    """
    if not has_minimum_samples(track):
        logger.warning(f"Insufficient data: {len(track)} GPS points < {MIN_TRACK_POINTS}")
        return None

    valid_points = filter_valid_points(track)
    if not has_minimum_samples(valid_points):
        logger.warning(f"Insufficient data: {len(valid_points)} points with a valid speed "
                       f"< {MIN_TRACK_POINTS}")
        return None

    segments = build_segments(valid_points)
    if not segments:
        logger.warning("Insufficient data: no usable segments")
        return None

    aggregate = aggregate_by_octant(segments)
    if aggregate is None:
        return None

    max_entry = aggregate.max_entry
    min_entry = aggregate.min_entry

    airspeed = expected_airspeed(wing_type, wing_size, pilot_weight)
    solution = solve_wind(max_entry, min_entry, segments, airspeed)

    confidence = calculate_confidence(
        directions_with_data=aggregate.directions_with_data,
        total_segments=len(segments),
        speed_difference=max_entry[1] - min_entry[1],
        variance=solution.variance,
        trim_delta=solution.trim_delta,
        has_pilot_weight=pilot_weight is not None,
        has_wing_size=wing_size is not None,
        max_median_speed=max_entry[1],
        expected_airspeed=airspeed,
        wind_speed=solution.speed
    )

    if is_below_resolution(solution.speed):
        logger.info(f"Wind {solution.speed:.2f} m/s is below GPS resolution, "
                    f"reporting unmeasurable wind")
        return WindEstimation.unresolved()

    estimation = WindEstimation(
        speed=solution.speed,
        speed_min=solution.speed_min,
        speed_max=solution.speed_max,
        direction=solution.direction,
        confidence=confidence,
        method=SPEED_VARIATION_METHOD
    )

    logger.info(f"Wind estimate: {estimation.speed:.1f} m/s from {estimation.direction:.0f}° "
                f"({estimation.direction_cardinal}), confidence {estimation.confidence:.2f}")
    return estimation
