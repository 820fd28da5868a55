"""
Application settings and configuration.

This module contains application-specific configuration, API settings, and defaults.
For algorithmic constants, see core.constants module.
"""

import logging
from typing import Dict, Any

# Import algorithmic constants from core module
from core.constants import (
    MIN_TRACK_POINTS,
    MAX_VALID_SPEED_MS,
    MIN_SEGMENT_SPEED_MS,
    MAX_SEGMENT_DURATION_SECONDS,
    MIN_DIRECTION_COVERAGE,
    MIN_SAMPLES_PER_DIRECTION,
    MIN_RESOLVABLE_WIND_MS,
    TRIM_SPEEDS_KMH,
    DEFAULT_TRIM_SPEED_KMH,
    REFERENCE_WING_LOADING,
    SPEED_VARIATION_METHOD
)

# App information
APP_NAME = "Wind Lab"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Estimate the wind of a paragliding flight from its GPS track"

# Display defaults
DEFAULT_WIND_UNIT = "knots"  # "knots" or "kmh"
WIND_UNITS = ["knots", "kmh"]

# Wind estimation defaults
DEFAULT_WIND_ESTIMATION_METHOD = SPEED_VARIATION_METHOD

# Upload parameters
MAX_UPLOAD_SIZE_BYTES = 50 * 1024 * 1024  # 50MB
MIN_UPLOAD_SIZE_BYTES = 100  # Smaller files cannot hold a GPX track

# API parameters
API_HOST = "0.0.0.0"
API_PORT = 8000
CORS_ORIGINS = [
    "http://localhost:3000",  # Web dev server
    "http://localhost:3001",  # Web dev server (alt port)
]

# Logging configuration
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# =============== Configuration Classes ===============
# These classes provide typed access to configuration sections

class WindConfig:
    """Configuration parameters for wind estimation."""
    ESTIMATION_METHOD = DEFAULT_WIND_ESTIMATION_METHOD
    MIN_TRACK_POINTS = MIN_TRACK_POINTS  # From core.constants
    MAX_VALID_SPEED = MAX_VALID_SPEED_MS  # From core.constants
    MIN_SEGMENT_SPEED = MIN_SEGMENT_SPEED_MS  # From core.constants
    MAX_SEGMENT_DURATION = MAX_SEGMENT_DURATION_SECONDS  # From core.constants
    MIN_DIRECTION_COVERAGE = MIN_DIRECTION_COVERAGE  # From core.constants
    MIN_SAMPLES_PER_DIRECTION = MIN_SAMPLES_PER_DIRECTION  # From core.constants
    MIN_RESOLVABLE_WIND = MIN_RESOLVABLE_WIND_MS  # From core.constants
    REFERENCE_WING_LOADING = REFERENCE_WING_LOADING  # From core.constants

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get wind configuration as a dictionary."""
        return {
            'estimation_method': cls.ESTIMATION_METHOD,
            'min_track_points': cls.MIN_TRACK_POINTS,
            'max_valid_speed_ms': cls.MAX_VALID_SPEED,
            'min_segment_speed_ms': cls.MIN_SEGMENT_SPEED,
            'max_segment_duration_s': cls.MAX_SEGMENT_DURATION,
            'min_direction_coverage': cls.MIN_DIRECTION_COVERAGE,
            'min_samples_per_direction': cls.MIN_SAMPLES_PER_DIRECTION,
            'min_resolvable_wind_ms': cls.MIN_RESOLVABLE_WIND,
            'reference_wing_loading': cls.REFERENCE_WING_LOADING,
        }


class TrimConfig:
    """Trim speed table exposed to clients."""
    TRIM_SPEEDS_KMH = TRIM_SPEEDS_KMH  # From core.constants
    DEFAULT_TRIM_SPEED_KMH = DEFAULT_TRIM_SPEED_KMH  # From core.constants

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get trim configuration as a dictionary."""
        return {
            'trim_speeds_kmh': dict(cls.TRIM_SPEEDS_KMH),
            'default_trim_speed_kmh': cls.DEFAULT_TRIM_SPEED_KMH,
        }


class UploadConfig:
    """Configuration parameters for GPX uploads."""
    MAX_SIZE = MAX_UPLOAD_SIZE_BYTES
    MIN_SIZE = MIN_UPLOAD_SIZE_BYTES
    ALLOWED_EXTENSIONS = ('.gpx',)

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get upload configuration as a dictionary."""
        return {
            'max_size_bytes': cls.MAX_SIZE,
            'min_size_bytes': cls.MIN_SIZE,
            'allowed_extensions': list(cls.ALLOWED_EXTENSIONS),
        }
