"""
Flight segment construction.

This module turns a filtered GPS track into per-step flight segments: the
heading flown between two consecutive samples and the ground speed the
receiver reported at the later one.
"""

import logging
from typing import List, Optional, Sequence

from core.constants import MIN_SEGMENT_SPEED_MS, MAX_SEGMENT_DURATION_SECONDS
from core.calculations import calculate_bearing
from core.models.segment import FlightSegment
from core.models.track import GPSTrackPoint

logger = logging.getLogger(__name__)


def calculate_duration(previous: GPSTrackPoint, current: GPSTrackPoint) -> float:
    """Seconds elapsed between two samples (negative if out of order)."""
    return (current.timestamp - previous.timestamp).total_seconds()


def build_segment(previous: GPSTrackPoint, current: GPSTrackPoint) -> Optional[FlightSegment]:
    """
    Build the segment between two consecutive samples.

    Args:
        previous: Earlier sample
        current: Later sample, whose recorded speed is used as ground speed

    Returns:
        FlightSegment, or None when the step is near-stationary or spans a
        sampling gap
    """
    speed = current.speed
    if speed is None or speed <= MIN_SEGMENT_SPEED_MS:
        return None

    duration = calculate_duration(previous, current)
    if duration <= 0 or duration >= MAX_SEGMENT_DURATION_SECONDS:
        return None

    heading = calculate_bearing(
        previous.latitude, previous.longitude,
        current.latitude, current.longitude
    )

    return FlightSegment(heading=heading, ground_speed=speed, duration=duration)


def build_segments(points: Sequence[GPSTrackPoint]) -> List[FlightSegment]:
    """
    Derive heading and ground speed for every adjacent pair of samples.

    Steps slower than 0.5 m/s (heading undefined) and steps with a
    non-positive or 30 s+ duration (missing data) are discarded rather than
    interpolated.

    Args:
        points: Filtered, chronologically ordered track points

    Returns:
        List of FlightSegment in track order
    """
    if len(points) < 2:
        logger.warning("Not enough points to build segments")
        return []

    segments = []
    skipped = 0

    for i in range(1, len(points)):
        segment = build_segment(points[i - 1], points[i])
        if segment is None:
            skipped += 1
            continue
        segments.append(segment)

    logger.debug(f"Built {len(segments)} segments from {len(points)} points "
                 f"({skipped} steps skipped)")
    return segments
