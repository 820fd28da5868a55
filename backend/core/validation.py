"""
Input validation utilities for the ingest and API boundary.

The wind engine itself never raises for data reasons; these checks reject
malformed input (bad files, impossible coordinates) before it reaches the
engine.
"""

import pandas as pd
import numpy as np
import logging
from typing import Any, Optional, Union
from pathlib import Path

logger = logging.getLogger(__name__)

REQUIRED_TRACK_COLUMNS = ('latitude', 'longitude', 'time')
COORDINATE_BOUNDS = {
    'latitude': (-90.0, 90.0),
    'longitude': (-180.0, 180.0),
}
TRACK_FILE_EXTENSIONS = ('.gpx',)
MAX_TRACK_FILE_BYTES = 50 * 1024 * 1024  # Same limit as the API upload


class ValidationError(Exception):
    """Raised when input cannot be turned into a usable track."""
    pass


def validate_track_dataframe(df: pd.DataFrame, context: str = "GPS track") -> pd.DataFrame:
    """
    Check that a track DataFrame can be handed to the wind engine.

    Coordinates must be within range and every point needs a timestamp;
    timestamps are either all zoned or all naive.
    Missing speeds are allowed: the engine drops those samples itself.

    Args:
        df: Track DataFrame
        context: Prefix for error messages ("GPX file morning", ...)

    Returns:
        The same DataFrame

    Raises:
        ValidationError: If a required column is missing or holds bad values
    """
    if df is None or df.empty:
        raise ValidationError(f"{context}: track is empty")

    missing = [column for column in REQUIRED_TRACK_COLUMNS if column not in df.columns]
    if missing:
        raise ValidationError(f"{context}: Missing required columns: {missing}")

    for column, (low, high) in COORDINATE_BOUNDS.items():
        out_of_range = ~df[column].between(low, high)
        if out_of_range.any():
            raise ValidationError(f"{context}: {int(out_of_range.sum())} {column} values "
                                  f"outside [{low:g}, {high:g}]")

    untimed = int(df['time'].isna().sum())
    if untimed:
        raise ValidationError(f"{context}: {untimed} points without a timestamp")

    # Naive and zoned timestamps cannot be subtracted from each other
    zoned = df['time'].map(lambda t: getattr(t, 'tzinfo', None) is not None)
    if zoned.any() and not zoned.all():
        raise ValidationError(f"{context}: {int((~zoned).sum())} timestamps without a time zone "
                              f"in a track with zoned timestamps")

    if 'speed' in df.columns:
        unspeeded = int(df['speed'].isna().sum())
        if unspeeded:
            logger.warning(f"{context}: {unspeeded} points without a speed")

    logger.debug(f"{context}: {len(df)} points passed validation")
    return df


def validate_optional_positive(
    value: Optional[Union[int, float, str]],
    context: str
) -> Optional[float]:
    """
    Validate an optional positive measurement (wing size, pilot weight).

    Args:
        value: Value to validate, or None
        context: Context description for error messages

    Returns:
        The value as a float, or None when absent or not positive

    Raises:
        ValidationError: If the value is not a finite number
    """
    if value is None:
        return None

    try:
        number = float(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{context}: Cannot convert to float: {value}") from e

    if not np.isfinite(number):
        raise ValidationError(f"{context}: Invalid value: {number}")

    if number <= 0:
        logger.debug(f"{context}: {number} treated as unknown")
        return None

    return number


def validate_file_upload(uploaded_file: Any) -> None:
    """
    Reject missing, oversized or non-GPX files before parsing.

    Size and extension are only checked when the file object exposes
    `size` / a string `name`; in-memory buffers pass through.
    """
    if uploaded_file is None:
        raise ValidationError("No file uploaded")

    size = getattr(uploaded_file, 'size', None)
    if size is not None and size > MAX_TRACK_FILE_BYTES:
        raise ValidationError(f"File too large: {size / 1024 / 1024:.1f}MB "
                              f"(max {MAX_TRACK_FILE_BYTES // (1024 * 1024)}MB)")

    name = getattr(uploaded_file, 'name', None)
    if isinstance(name, str):
        suffix = Path(name).suffix.lower()
        if suffix not in TRACK_FILE_EXTENSIONS:
            raise ValidationError(f"Invalid file type: {suffix or 'none'} (expected .gpx)")
