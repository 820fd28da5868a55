"""
GPX ingest.

Turns a GPX file into the track DataFrame the wind engine consumes. GPX 1.0
files from flight instruments usually carry a <speed> per point; GPX 1.1
files do not, so missing speeds are derived from consecutive positions.
"""

import os
import gpxpy
import gpxpy.gpx
import pandas as pd
import logging
from pathlib import Path
from typing import Tuple, Dict, Optional, Any

from core.calculations import calculate_distance
from core.models.track import TRACK_COLUMNS
from core.validation import validate_file_upload, validate_track_dataframe, ValidationError

logger = logging.getLogger(__name__)


def derive_missing_speeds(df: pd.DataFrame) -> pd.DataFrame:
    """
    Fill missing speeds from the geodesic distance to the previous point.

    Recorded speeds are kept as they are. The first point, and points
    without a positive time step, keep a missing speed.

    Args:
        df: Track DataFrame with 'latitude', 'longitude', 'time', 'speed'

    Returns:
        Copy of the DataFrame with derived speeds filled in
    """
    result = df.copy()
    missing = result['speed'].isna()
    if not missing.any():
        return result

    derived = 0
    for i in range(1, len(result)):
        if not missing.iloc[i]:
            continue

        previous = result.iloc[i - 1]
        current = result.iloc[i]
        if previous['time'] is None or current['time'] is None:
            continue

        duration = (current['time'] - previous['time']).total_seconds()
        if duration <= 0:
            continue

        distance = calculate_distance(
            previous['latitude'], previous['longitude'],
            current['latitude'], current['longitude']
        )
        result.iat[i, result.columns.get_loc('speed')] = distance / duration
        derived += 1

    logger.info(f"Derived {derived} speeds from positions ({int(missing.sum())} missing)")
    return result


def parse_gpx(gpx_file) -> gpxpy.gpx.GPX:
    """
    Parse a GPX document, mapping every parser failure to ValidationError.

    Args:
        gpx_file: File-like object (text or bytes) holding GPX XML

    Returns:
        Parsed gpxpy document with at least one track
    """
    validate_file_upload(gpx_file)

    try:
        gpx = gpxpy.parse(gpx_file)
    except gpxpy.gpx.GPXException as e:
        raise ValidationError(f"Invalid GPX file format: {e}") from e
    except Exception as e:
        raise ValidationError(f"Failed to parse GPX file: {e}") from e

    if not gpx.tracks:
        raise ValidationError("GPX file contains no tracks")

    return gpx


def extract_metadata(gpx: gpxpy.gpx.GPX, source_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Collect the descriptive fields of a GPX document.

    The first track's name wins; otherwise the source file's stem is used.
    """
    name = gpx.tracks[0].name if gpx.tracks else None
    if not name and source_name:
        name = os.path.splitext(os.path.basename(source_name))[0]

    return {
        'name': name,
        'description': gpx.description or None,
        'time': gpx.time,
        'author': gpx.author_name or None,
    }


def gpx_to_dataframe(gpx: gpxpy.gpx.GPX) -> pd.DataFrame:
    """
    Flatten every track point of a document into a track DataFrame.

    Args:
        gpx: Parsed gpxpy document

    Returns:
        DataFrame with TRACK_COLUMNS; speed is NaN where the file has none
    """
    rows = [
        (point.latitude, point.longitude, point.time, point.speed, point.elevation)
        for point in gpx.walk(only_points=True)
    ]

    df = pd.DataFrame(rows, columns=TRACK_COLUMNS)
    df['speed'] = pd.to_numeric(df['speed'], errors='coerce')
    return df


def load_gpx_file(gpx_file) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """
    Load a GPX file into a validated track DataFrame.

    Args:
        gpx_file: A file-like object containing GPX data

    Returns:
        tuple: (DataFrame with track data, dict with metadata)

    Raises:
        ValidationError: If the file is not a usable GPX track
    """
    gpx = parse_gpx(gpx_file)

    source_name = getattr(gpx_file, 'name', None)
    metadata = extract_metadata(gpx, source_name if isinstance(source_name, str) else None)

    df = gpx_to_dataframe(gpx)
    if df.empty:
        raise ValidationError("GPX file contains no track points")

    recorded = int(df['speed'].notna().sum())
    metadata['recorded_speeds'] = recorded

    df = validate_track_dataframe(df, f"GPX file {metadata['name'] or 'unknown'}")
    if recorded < len(df):
        df = derive_missing_speeds(df)

    logger.info(f"Loaded GPX track with {len(df)} points ({recorded} recorded speeds)")
    return df, metadata


def load_gpx_from_path(file_path: str) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """
    Load a GPX file from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the file is not a usable GPX track
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"GPX file not found: {file_path}")

    with path.open('r') as f:
        return load_gpx_file(f)

