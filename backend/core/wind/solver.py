"""
Wind solver.

Ground speed = airspeed ± wind along the flight's dominant axis, so half the
spread between the fastest and slowest octant medians is the wind speed and
the fastest octant points downwind.
"""

import math
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from core.constants import (
    HALF_CIRCLE_DEGREES, STD_DEV_UNCERTAINTY_FACTOR, TRIM_UNCERTAINTY_FACTOR,
    MIN_RESOLVABLE_WIND_MS
)
from core.calculations import (
    octant_to_heading, normalize_angle, speed_variance, meters_per_second_to_kmh
)
from core.models.segment import FlightSegment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindSolution:
    """Raw solver output before confidence scoring."""
    speed: float  # m/s
    direction: float  # Degrees the wind blows from
    speed_min: float
    speed_max: float
    trim_delta: float  # |estimated airspeed - expected airspeed|, m/s
    estimated_airspeed: float  # m/s
    variance: float  # Ground speed variance over all segments, (m/s)²

    @property
    def std_dev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def is_resolvable(self) -> bool:
        return not is_below_resolution(self.speed)


def is_below_resolution(wind_speed: float) -> bool:
    """Check whether a wind speed is inside GPS ground-speed noise."""
    return wind_speed < MIN_RESOLVABLE_WIND_MS


def solve_wind(
    max_entry: Tuple[int, float],
    min_entry: Tuple[int, float],
    segments: Sequence[FlightSegment],
    expected_airspeed: float
) -> WindSolution:
    """
    Derive wind speed, direction and uncertainty band from the octant extremes.

    Args:
        max_entry: (octant, median speed) of the fastest octant
        min_entry: (octant, median speed) of the slowest octant
        segments: All flight segments, used for the ground speed spread
        expected_airspeed: Trim airspeed baseline in m/s

    Returns:
        WindSolution
    """
    max_octant, max_speed = max_entry
    _, min_speed = min_entry

    wind_speed = (max_speed - min_speed) / 2

    # Wind comes from opposite the heading where ground speed peaked
    tailwind_heading = octant_to_heading(max_octant)
    wind_direction = normalize_angle(tailwind_heading + HALF_CIRCLE_DEGREES)

    estimated_airspeed = (max_speed + min_speed) / 2
    trim_delta = abs(estimated_airspeed - expected_airspeed)

    logger.info(f"Estimated airspeed: {meters_per_second_to_kmh(estimated_airspeed):.1f} km/h, "
                f"expected trim: {meters_per_second_to_kmh(expected_airspeed):.1f} km/h")

    variance = speed_variance(segment.ground_speed for segment in segments)
    std_dev = math.sqrt(variance)

    trim_uncertainty = trim_delta * TRIM_UNCERTAINTY_FACTOR
    spread = std_dev * STD_DEV_UNCERTAINTY_FACTOR + trim_uncertainty
    speed_min = max(0.0, wind_speed - spread)
    speed_max = wind_speed + spread

    return WindSolution(
        speed=wind_speed,
        direction=wind_direction,
        speed_min=speed_min,
        speed_max=speed_max,
        trim_delta=trim_delta,
        estimated_airspeed=estimated_airspeed,
        variance=variance
    )
