"""
Track sample filtering.

This module removes GPS samples that cannot be trusted as ground-speed
measurements before any heading analysis runs:
1. Samples without a recorded speed
2. Samples with a zero or negative speed
3. Samples at or above 50 m/s (180 km/h), which are receiver glitches

Filtering never reorders the track and never raises; callers check
`has_minimum_samples` before and after filtering.
"""

import logging
from typing import List, Sequence

from core.constants import MIN_TRACK_POINTS, MIN_VALID_SPEED_MS, MAX_VALID_SPEED_MS
from core.models.track import GPSTrackPoint

logger = logging.getLogger(__name__)


def is_valid_speed(speed) -> bool:
    """Check whether a recorded ground speed is usable."""
    if speed is None:
        return False
    return MIN_VALID_SPEED_MS < speed < MAX_VALID_SPEED_MS


def has_minimum_samples(points: Sequence[GPSTrackPoint], minimum: int = MIN_TRACK_POINTS) -> bool:
    """Check that a track holds enough samples for wind inference."""
    return len(points) >= minimum


def filter_valid_points(points: Sequence[GPSTrackPoint]) -> List[GPSTrackPoint]:
    """
    Keep only the samples with a usable ground speed.

    Args:
        points: Chronologically ordered track points

    Returns:
        New list with the valid points, in their original order
    """
    if not points:
        return []

    filtered = [point for point in points if is_valid_speed(point.speed)]

    removed = len(points) - len(filtered)
    if removed > 0:
        logger.debug(f"Speed filter: {len(points)} -> {len(filtered)} points "
                     f"({removed} without a valid speed)")

    return filtered
