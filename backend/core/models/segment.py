"""
Segment data models.

This module defines the flight segment derived from a pair of consecutive GPS
samples. Segments only live for the duration of one wind estimate.
"""

from dataclasses import dataclass
from typing import List, Dict, Any
import pandas as pd

from core.calculations import heading_to_octant, meters_per_second_to_knots


@dataclass(frozen=True)
class FlightSegment:
    """
    Heading and ground speed between two consecutive GPS samples.
    """
    heading: float  # Degrees (0-360)
    ground_speed: float  # m/s, the receiver's speed at the later sample
    duration: float  # Seconds between the two samples

    @property
    def octant(self) -> int:
        """Compass octant (0-7) this segment's heading falls into."""
        return heading_to_octant(self.heading)

    @property
    def ground_speed_knots(self) -> float:
        """Ground speed in knots."""
        return meters_per_second_to_knots(self.ground_speed)

    def to_dict(self) -> Dict[str, Any]:
        """Convert segment to dictionary for DataFrame creation."""
        return {
            'heading': self.heading,
            'ground_speed': self.ground_speed,
            'duration': self.duration,
            'octant': self.octant,
        }


def segments_to_dataframe(segments: List[FlightSegment]) -> pd.DataFrame:
    """
    Convert a list of segments to a pandas DataFrame.

    Args:
        segments: List of FlightSegment objects

    Returns:
        pandas DataFrame with segment data
    """
    if not segments:
        return pd.DataFrame()

    data = [segment.to_dict() for segment in segments]
    return pd.DataFrame(data)
