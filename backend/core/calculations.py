"""
Shared calculations module.

This module contains the shared calculation functions used by the segment
builder, the wind pipeline and the service layer. It is the single source of
truth for geometric operations and unit conversions.
"""

import math
import numpy as np
from geopy.distance import geodesic
from typing import Iterable
import logging

from core.constants import (
    FULL_CIRCLE_DEGREES, METERS_PER_SECOND_TO_KNOTS, KNOTS_TO_METERS_PER_SECOND,
    METERS_PER_SECOND_TO_KMH, KMH_TO_METERS_PER_SECOND, METERS_PER_KILOMETER,
    OCTANT_COUNT, OCTANT_WIDTH_DEGREES, OCTANT_CENTER_OFFSET_DEGREES, OCTANT_LABELS
)

logger = logging.getLogger(__name__)


# =============================================================================
# BASIC GEOMETRIC CALCULATIONS
# =============================================================================

def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the initial great-circle bearing between two points in degrees."""
    # Convert to radians
    lat1 = math.radians(lat1)
    lon1 = math.radians(lon1)
    lat2 = math.radians(lat2)
    lon2 = math.radians(lon2)

    # Calculate bearing
    x = math.sin(lon2 - lon1) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1)
    initial_bearing = math.atan2(x, y)

    # Convert to degrees
    initial_bearing = math.degrees(initial_bearing)
    compass_bearing = (initial_bearing + FULL_CIRCLE_DEGREES) % FULL_CIRCLE_DEGREES

    return compass_bearing


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance between two points in meters."""
    return geodesic((lat1, lon1), (lat2, lon2)).meters


def normalize_angle(angle: float) -> float:
    """Wrap an angle into the [0, 360) range."""
    normalized = angle % FULL_CIRCLE_DEGREES
    # -1e-15 % 360 rounds to 360.0
    return 0.0 if normalized >= FULL_CIRCLE_DEGREES else normalized


# =============================================================================
# COMPASS OCTANTS
# =============================================================================

def heading_to_octant(heading: float) -> int:
    """
    Quantize a heading into one of the 8 compass octants.

    Buckets are centered on the compass points, so 0 covers [337.5, 22.5),
    1 covers [22.5, 67.5) and so on round to 7 (NW).

    Args:
        heading: Heading in degrees (0-360)

    Returns:
        Octant index 0-7 (N, NE, E, SE, S, SW, W, NW)
    """
    return int(math.floor((heading + OCTANT_CENTER_OFFSET_DEGREES) / OCTANT_WIDTH_DEGREES)) % OCTANT_COUNT


def octant_to_heading(octant: int) -> float:
    """Center heading of an octant in degrees."""
    return (octant % OCTANT_COUNT) * OCTANT_WIDTH_DEGREES


def direction_to_cardinal(direction: float) -> str:
    """Cardinal label (N, NE, ... NW) for a direction in degrees."""
    return OCTANT_LABELS[heading_to_octant(normalize_angle(direction))]


# =============================================================================
# STATISTICS
# =============================================================================

def median_speed(speeds: Iterable[float]) -> float:
    """Median of a collection of speeds (mean of the middle pair for even counts)."""
    return float(np.median(np.asarray(list(speeds), dtype=float)))


def speed_variance(speeds: Iterable[float]) -> float:
    """Population variance of a collection of speeds."""
    values = np.asarray(list(speeds), dtype=float)
    if values.size == 0:
        return 0.0
    return float(np.var(values))


# =============================================================================
# UNIT CONVERSIONS
# =============================================================================

def meters_per_second_to_knots(speed_ms: float) -> float:
    """Convert meters per second to knots."""
    return speed_ms * METERS_PER_SECOND_TO_KNOTS


def knots_to_meters_per_second(speed_knots: float) -> float:
    """Convert knots to meters per second."""
    return speed_knots * KNOTS_TO_METERS_PER_SECOND


def meters_per_second_to_kmh(speed_ms: float) -> float:
    """Convert meters per second to kilometers per hour."""
    return speed_ms * METERS_PER_SECOND_TO_KMH


def kmh_to_meters_per_second(speed_kmh: float) -> float:
    """Convert kilometers per hour to meters per second."""
    return speed_kmh * KMH_TO_METERS_PER_SECOND


def meters_to_kilometers(distance_m: float) -> float:
    """Convert meters to kilometers."""
    return distance_m / METERS_PER_KILOMETER
