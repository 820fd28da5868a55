"""
GPS track data models.

This module defines the GPS sample recorded during a flight and the helpers
that move a track between its list form (consumed by the wind engine) and its
DataFrame form (produced by GPX ingest and used by the service layer).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, List, Dict, Any
import pandas as pd

TRACK_COLUMNS = ['latitude', 'longitude', 'time', 'speed', 'altitude']


@dataclass(frozen=True)
class GPSTrackPoint:
    """
    A single GPS sample of a flight track.

    Produced by the flight recorder; the wind engine only reads it.
    """
    latitude: float
    longitude: float
    timestamp: datetime
    speed: Optional[float] = None  # Ground speed in m/s as reported by the receiver
    altitude: Optional[float] = None  # Meters

    def to_dict(self) -> Dict[str, Any]:
        """Convert point to dictionary for DataFrame creation."""
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'time': self.timestamp,
            'speed': self.speed,
            'altitude': self.altitude,
        }


def _optional_float(value: Any) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)


def track_to_dataframe(points: List[GPSTrackPoint]) -> pd.DataFrame:
    """
    Convert a list of track points to a pandas DataFrame.

    Args:
        points: List of GPSTrackPoint objects

    Returns:
        pandas DataFrame with latitude, longitude, time, speed, altitude columns
    """
    if not points:
        return pd.DataFrame(columns=TRACK_COLUMNS)

    return pd.DataFrame([point.to_dict() for point in points], columns=TRACK_COLUMNS)


def dataframe_to_track(df: pd.DataFrame) -> List[GPSTrackPoint]:
    """
    Convert a track DataFrame to a list of GPSTrackPoint objects.

    Rows keep their order; missing speed or altitude columns become None.

    Args:
        df: DataFrame with 'latitude', 'longitude', 'time' and optionally
            'speed' and 'altitude' columns

    Returns:
        List of GPSTrackPoint objects
    """
    points = []

    for _, row in df.iterrows():
        timestamp = row['time']
        if isinstance(timestamp, pd.Timestamp):
            timestamp = timestamp.to_pydatetime()

        points.append(GPSTrackPoint(
            latitude=float(row['latitude']),
            longitude=float(row['longitude']),
            timestamp=timestamp,
            speed=_optional_float(row.get('speed')),
            altitude=_optional_float(row.get('altitude'))
        ))

    return points
