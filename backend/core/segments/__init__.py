"""
Segments package.

This package derives flight segments (heading, ground speed, duration) from
GPS tracks. Clean, focused interface with no circular dependencies.
"""

# Core segment construction functions
from .builder import (
    build_segments,
    build_segment,
    calculate_duration,
)

# Segment models
from core.models.segment import FlightSegment, segments_to_dataframe

# Clean public API - only segment construction and models
__all__ = [
    # Main construction function
    'build_segments',

    # Per-step helpers
    'build_segment',
    'calculate_duration',

    # Models
    'FlightSegment',
    'segments_to_dataframe',
]
