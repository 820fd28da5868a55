"""
Track analysis service.

Runs the wind estimator on one flight and collects the figures shown next to
the estimate: a track summary and a per-octant ground speed breakdown.
"""

import pandas as pd
import logging
from typing import Dict, Any, Optional, List

from core.gpx import load_gpx_file
from core.calculations import (
    calculate_distance, meters_per_second_to_knots, meters_to_kilometers, median_speed
)
from core.constants import OCTANT_LABELS
from core.filtering import filter_valid_points
from core.models.track import dataframe_to_track, GPSTrackPoint
from core.segments import build_segments
from core.wind.aggregation import group_speeds_by_octant
from core.wind.factory import WingProfile
from core.wind.models import WindEstimation
from services.wind_service import get_wind_service, parse_wing_size

logger = logging.getLogger(__name__)


def calculate_track_summary(track: List[GPSTrackPoint]) -> Dict[str, Any]:
    """
    Calculate basic metrics for the track.

    Args:
        track: Chronologically ordered GPS samples

    Returns:
        Dict with point count, duration, distance (km) and ground speed
        statistics (knots)
    """
    summary: Dict[str, Any] = {
        'point_count': len(track),
        'duration_seconds': 0.0,
        'total_distance_km': 0.0,
        'avg_speed_knots': 0.0,
        'max_speed_knots': 0.0,
    }

    if len(track) < 2:
        return summary

    summary['duration_seconds'] = (track[-1].timestamp - track[0].timestamp).total_seconds()

    distance_m = sum(
        calculate_distance(p1.latitude, p1.longitude, p2.latitude, p2.longitude)
        for p1, p2 in zip(track, track[1:])
    )
    summary['total_distance_km'] = meters_to_kilometers(distance_m)

    speeds = [point.speed for point in filter_valid_points(track)]
    if speeds:
        summary['avg_speed_knots'] = meters_per_second_to_knots(sum(speeds) / len(speeds))
        summary['max_speed_knots'] = meters_per_second_to_knots(max(speeds))

    return summary


def calculate_octant_breakdown(track: List[GPSTrackPoint]) -> List[Dict[str, Any]]:
    """
    Per-octant sample counts and median ground speed for display.

    Args:
        track: Chronologically ordered GPS samples

    Returns:
        One dict per octant with label, sample count and median speed (m/s,
        None for octants without samples)
    """
    segments = build_segments(filter_valid_points(track))
    speeds_by_octant = group_speeds_by_octant(segments)

    return [
        {
            'octant': octant,
            'label': OCTANT_LABELS[octant],
            'samples': len(speeds),
            'median_speed': median_speed(speeds) if speeds else None,
        }
        for octant, speeds in enumerate(speeds_by_octant)
    ]


class TrackAnalysisResult:
    """Container for track analysis results."""

    def __init__(self,
                 track: List[GPSTrackPoint],
                 metadata: Dict[str, Any],
                 wind_estimate: Optional[WindEstimation],
                 filename: str,
                 profile: WingProfile):
        self.track = track
        self.metadata = metadata
        self.wind_estimate = wind_estimate
        self.filename = filename
        self.profile = profile

        self.summary = calculate_track_summary(track)
        self.octants = calculate_octant_breakdown(track)

    @property
    def has_estimate(self) -> bool:
        return self.wind_estimate is not None

    @property
    def reason(self) -> Optional[str]:
        """Why no estimate is available, if so."""
        if self.has_estimate:
            return None
        return "Not enough GPS data or directional coverage to estimate the wind"


def analyze_track_data(track_data: pd.DataFrame,
                       filename: str = "track.gpx",
                       metadata: Optional[Dict[str, Any]] = None,
                       wing_type: Optional[str] = None,
                       wing_size: Optional[str] = None,
                       pilot_weight: Optional[float] = None) -> TrackAnalysisResult:
    """
    Estimate the wind for a track already loaded into a DataFrame.

    Args:
        track_data: DataFrame containing track data
        filename: Display name of the track
        metadata: GPX metadata, if any
        wing_type: Category of the wing flown
        wing_size: Wing size, numeric or free text ("18m²")
        pilot_weight: Pilot weight in kg

    Returns:
        TrackAnalysisResult (wind_estimate is None when the track cannot
        support one)
    """
    metadata = metadata or {}

    try:
        logger.info(f"Analyzing track data for {filename} with {len(track_data)} points")

        track = dataframe_to_track(track_data)
        profile = WingProfile(
            wing_type=wing_type,
            wing_size=parse_wing_size(wing_size),
            pilot_weight=pilot_weight if pilot_weight and pilot_weight > 0 else None
        )

        wind_estimate = get_wind_service().estimate(track, profile)

        if wind_estimate is None:
            logger.warning(f"No wind estimate for {filename}")
        else:
            logger.info(f"Successfully analyzed {filename}: {wind_estimate.speed:.1f} m/s "
                        f"from {wind_estimate.direction:.0f}°")

        return TrackAnalysisResult(
            track=track,
            metadata=metadata,
            wind_estimate=wind_estimate,
            filename=filename,
            profile=profile
        )

    except Exception as e:
        logger.error(f"Error analyzing {filename}: {e}")
        raise


def analyze_track_file(file,
                       wing_type: Optional[str] = None,
                       wing_size: Optional[str] = None,
                       pilot_weight: Optional[float] = None) -> TrackAnalysisResult:
    """
    Load a GPX file and estimate the wind for it.

    Args:
        file: File object to analyze
        wing_type: Category of the wing flown
        wing_size: Wing size, numeric or free text
        pilot_weight: Pilot weight in kg

    Returns:
        TrackAnalysisResult

    Raises:
        ValidationError: If the file is not a usable GPX track
    """
    filename = getattr(file, 'name', None) or 'uploaded_track.gpx'

    try:
        track_data, metadata = load_gpx_file(file)
        logger.info(f"Loaded {filename} with {len(track_data)} points")

        return analyze_track_data(
            track_data=track_data,
            filename=filename,
            metadata=metadata,
            wing_type=wing_type,
            wing_size=wing_size,
            pilot_weight=pilot_weight
        )

    except Exception as e:
        logger.error(f"Error analyzing {filename}: {e}")
        raise
