"""
Directional aggregation of flight segments.

Ground speeds are bucketed into the 8 compass octants and reduced to a median
per octant. The fastest octant is where the wind pushed from behind, the
slowest is where the wing flew into it.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from core.constants import (
    OCTANT_COUNT, OCTANT_LABELS, MIN_DIRECTION_COVERAGE, MIN_SAMPLES_PER_DIRECTION
)
from core.calculations import heading_to_octant, median_speed
from core.models.segment import FlightSegment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectionalAggregate:
    """Per-octant ground speed statistics for one flight."""
    speeds_by_octant: Tuple[Tuple[float, ...], ...]
    median_speeds: Dict[int, float] = field(default_factory=dict)

    @property
    def directions_with_data(self) -> int:
        """Number of octants with enough samples to count."""
        return len(self.median_speeds)

    @property
    def max_entry(self) -> Tuple[int, float]:
        """(octant, median) with the highest median ground speed (tailwind)."""
        # Lowest octant index wins ties
        octant = max(sorted(self.median_speeds), key=lambda k: self.median_speeds[k])
        return octant, self.median_speeds[octant]

    @property
    def min_entry(self) -> Tuple[int, float]:
        """(octant, median) with the lowest median ground speed (headwind)."""
        octant = min(sorted(self.median_speeds), key=lambda k: self.median_speeds[k])
        return octant, self.median_speeds[octant]

    @property
    def speed_difference(self) -> float:
        """Spread between the fastest and slowest octant medians."""
        return self.max_entry[1] - self.min_entry[1]

    def sample_counts(self) -> Dict[str, int]:
        """Samples per octant, keyed by compass label."""
        return {OCTANT_LABELS[i]: len(speeds) for i, speeds in enumerate(self.speeds_by_octant)}


def group_speeds_by_octant(segments: Sequence[FlightSegment]) -> List[List[float]]:
    """
    Bucket segment ground speeds by heading octant.

    Args:
        segments: Flight segments

    Returns:
        List of 8 lists of ground speeds, indexed by octant (N=0 ... NW=7)
    """
    speeds_by_octant: List[List[float]] = [[] for _ in range(OCTANT_COUNT)]

    for segment in segments:
        speeds_by_octant[heading_to_octant(segment.heading)].append(segment.ground_speed)

    return speeds_by_octant


def aggregate_by_octant(
    segments: Sequence[FlightSegment],
    min_samples: int = MIN_SAMPLES_PER_DIRECTION,
    min_directions: int = MIN_DIRECTION_COVERAGE
) -> Optional[DirectionalAggregate]:
    """
    Reduce segments to a median ground speed per compass octant.

    A straight-line flight cannot reveal the wind, so at least `min_directions`
    octants must each hold `min_samples` segments.

    Args:
        segments: Flight segments
        min_samples: Samples an octant needs to count as covered
        min_directions: Covered octants required

    Returns:
        DirectionalAggregate, or None when directional coverage is insufficient
    """
    speeds_by_octant = group_speeds_by_octant(segments)

    median_speeds = {
        octant: median_speed(speeds)
        for octant, speeds in enumerate(speeds_by_octant)
        if len(speeds) >= min_samples
    }

    if len(median_speeds) < min_directions:
        logger.warning(f"Insufficient directional coverage "
                       f"({len(median_speeds)} < {min_directions} octants)")
        return None

    aggregate = DirectionalAggregate(
        speeds_by_octant=tuple(tuple(speeds) for speeds in speeds_by_octant),
        median_speeds=median_speeds
    )

    logger.info(f"Directional coverage: {aggregate.directions_with_data}/{OCTANT_COUNT} octants")
    for octant, median in sorted(median_speeds.items()):
        logger.debug(f"  {OCTANT_LABELS[octant]}: median {median:.2f} m/s "
                     f"({len(speeds_by_octant[octant])} samples)")

    return aggregate
