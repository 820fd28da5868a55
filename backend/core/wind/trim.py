"""
Trim speed model.

The airspeed a paraglider flies hands-up depends on its category and on how
heavily it is loaded. The expected trim speed is only a plausibility baseline
for the wind solver; it never overrides the measured ground speeds.
"""

import logging
from typing import Optional

from core.constants import (
    TRIM_SPEEDS_KMH, DEFAULT_TRIM_SPEED_KMH, REFERENCE_WING_LOADING,
    TRIM_ADJUSTMENT_PER_LOADING_UNIT
)
from core.calculations import kmh_to_meters_per_second, meters_per_second_to_kmh

logger = logging.getLogger(__name__)


def base_trim_speed(wing_type: Optional[str] = None) -> float:
    """Trim speed in m/s for a wing category; unknown categories use the default."""
    return kmh_to_meters_per_second(TRIM_SPEEDS_KMH.get(wing_type or "", DEFAULT_TRIM_SPEED_KMH))


def wing_loading(pilot_weight: Optional[float], wing_size: Optional[float]) -> Optional[float]:
    """
    Wing loading in kg/m².

    Args:
        pilot_weight: All-up weight in kg
        wing_size: Projected wing area in m²

    Returns:
        weight / area, or None unless both are known and positive
    """
    if pilot_weight is None or wing_size is None:
        return None
    if pilot_weight <= 0 or wing_size <= 0:
        return None
    return pilot_weight / wing_size


def expected_airspeed(
    wing_type: Optional[str] = None,
    wing_size: Optional[float] = None,
    pilot_weight: Optional[float] = None
) -> float:
    """
    Expected trim airspeed for a wing and pilot.

    Heavier-than-reference loading speeds the wing up by 3% per kg/m²,
    lighter loading slows it down. Without both weight and size the base
    category trim is returned unadjusted.

    Args:
        wing_type: Wing category ("Soaring", "Cross", "Thermal", ...)
        wing_size: Projected wing area in m²
        pilot_weight: All-up weight in kg

    Returns:
        Expected airspeed in m/s
    """
    trim_speed = base_trim_speed(wing_type)

    loading = wing_loading(pilot_weight, wing_size)
    if loading is None:
        return trim_speed

    loading_delta = loading - REFERENCE_WING_LOADING
    adjusted = trim_speed * (1.0 + loading_delta * TRIM_ADJUSTMENT_PER_LOADING_UNIT)

    logger.info(f"Wing loading: {loading:.1f} kg/m², adjusted trim speed: "
                f"{meters_per_second_to_kmh(adjusted):.1f} km/h")
    return adjusted
