"""
Wind estimation module.

This module provides wind speed and direction estimation from GPS tracks with
clean, organized interfaces.
"""

# Import models first (no dependencies beyond core.calculations)
from .models import WindEstimation, format_flight_wind, format_flight_wind_range

# Lazy import algorithms to avoid circular imports
# Users should import directly: from core.wind.factory import estimate_wind

__all__ = [
    'WindEstimation',
    'format_flight_wind',
    'format_flight_wind_range',
]
