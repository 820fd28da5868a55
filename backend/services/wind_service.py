"""
Wind analysis service.

This module provides business logic for wind estimation on recorded flights:
turning wing profile fields into engine parameters and the engine's result
into the fields stored on a flight record. Used by the API backend.
"""

import re
import logging
from typing import Optional, Sequence, Dict, Any

from core.models.track import GPSTrackPoint
from core.wind.factory import estimate_wind, WingProfile
from core.wind.models import WindEstimation
from config.settings import DEFAULT_WIND_ESTIMATION_METHOD

logger = logging.getLogger(__name__)

_SIZE_NUMBER = re.compile(r"[0-9]+(?:[.,][0-9]+)?")


def parse_wing_size(size_text: Optional[str]) -> Optional[float]:
    """
    Parse a wing size from a free-text field.

    Wing catalogs store sizes as "18", "18m²", "18,5 m2" or "M (22-24)". The
    first number in the text is the size; a comma counts as a decimal point.

    Args:
        size_text: Free-text size field

    Returns:
        Projected area in m², or None if no number can be read
    """
    if size_text is None:
        return None

    if isinstance(size_text, (int, float)):
        return float(size_text) if size_text > 0 else None

    match = _SIZE_NUMBER.search(str(size_text))
    if match is None:
        logger.debug(f"Cannot read wing size from {size_text!r}")
        return None

    size = float(match.group().replace(",", "."))
    return size if size > 0 else None


class WindService:
    """
    Service for wind estimation on flights.

    This class centralizes the business logic between flight records and the
    wind estimation algorithms.
    """

    def __init__(self, method: str = DEFAULT_WIND_ESTIMATION_METHOD):
        self.method = method

    def estimate(
        self,
        track: Sequence[GPSTrackPoint],
        profile: Optional[WingProfile] = None
    ) -> Optional[WindEstimation]:
        """
        Estimate the wind for a GPS track.

        Args:
            track: Chronologically ordered GPS samples
            profile: Wing and pilot metadata, or None to use defaults

        Returns:
            WindEstimation, or None if the track cannot support an estimate
        """
        if profile is None:
            profile = WingProfile()

        return estimate_wind(track, method=self.method, params=profile)

    def estimate_for_flight(
        self,
        track: Optional[Sequence[GPSTrackPoint]],
        wing_type: Optional[str] = None,
        wing_size: Optional[str] = None,
        pilot_weight: Optional[float] = None
    ) -> Optional[WindEstimation]:
        """
        Estimate the wind for a recorded flight.

        Args:
            track: The flight's GPS track, if any
            wing_type: Category of the wing flown
            wing_size: Free-text size field of the wing
            pilot_weight: Pilot weight in kg; 0 or less means unknown

        Returns:
            WindEstimation, or None if the flight has no usable track
        """
        if not track:
            logger.warning("No GPS track for this flight")
            return None

        profile = WingProfile(
            wing_type=wing_type,
            wing_size=parse_wing_size(wing_size),
            pilot_weight=pilot_weight if pilot_weight and pilot_weight > 0 else None
        )

        logger.info(f"Estimating wind from {len(track)} GPS points "
                    f"(type={profile.wing_type}, size={profile.wing_size}, "
                    f"weight={profile.pilot_weight})")

        estimation = self.estimate(track, profile)
        if estimation is None:
            logger.info("Could not estimate the wind for this flight")
        return estimation

    @staticmethod
    def flight_fields(estimation: Optional[WindEstimation]) -> Dict[str, Any]:
        """
        Map an estimate onto the wind fields of a flight record.

        Args:
            estimation: Engine result, or None

        Returns:
            Dict with wind_speed, wind_speed_min, wind_speed_max,
            wind_direction and wind_confidence (all None without an estimate)
        """
        if estimation is None:
            return {
                'wind_speed': None,
                'wind_speed_min': None,
                'wind_speed_max': None,
                'wind_direction': None,
                'wind_confidence': None,
            }

        return {
            'wind_speed': estimation.speed,
            'wind_speed_min': estimation.speed_min,
            'wind_speed_max': estimation.speed_max,
            'wind_direction': estimation.direction,
            'wind_confidence': estimation.confidence,
        }


def get_wind_service() -> WindService:
    """
    Get a WindService instance.

    Returns:
        WindService instance
    """
    return WindService()
