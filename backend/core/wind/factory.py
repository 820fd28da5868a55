"""
Wind estimation algorithm factory and base classes.

This module provides a factory pattern for wind estimation algorithms.
Currently supports 'speed_variation' (ground speed by heading).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Type, Optional, Sequence, Any

from core.constants import SPEED_VARIATION_METHOD
from core.models.track import GPSTrackPoint
from core.wind.models import WindEstimation


@dataclass(frozen=True)
class WingProfile:
    """Wing and pilot metadata that refine the trim-speed baseline."""
    wing_type: Optional[str] = None
    wing_size: Optional[float] = None  # m², projected area
    pilot_weight: Optional[float] = None  # kg

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for function calls."""
        return {
            'wing_type': self.wing_type,
            'wing_size': self.wing_size,
            'pilot_weight': self.pilot_weight
        }


class WindEstimator(ABC):
    """Abstract base class for wind estimation algorithms."""

    @abstractmethod
    def estimate(
        self,
        track: Sequence[GPSTrackPoint],
        params: Optional[WingProfile] = None
    ) -> Optional[WindEstimation]:
        """
        Estimate the wind from a flight's GPS track.

        Args:
            track: Chronologically ordered GPS samples
            params: Optional wing and pilot metadata

        Returns:
            WindEstimation, or None if the track cannot support an estimate
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the algorithm."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Description of the algorithm."""
        pass


class SpeedVariationWindEstimator(WindEstimator):
    """
    Ground speed variation by heading.

    The only registered estimator. It:
    - Buckets ground speeds into 8 compass octants
    - Uses median speeds for outlier resistance
    - Checks the result against the wing's expected trim speed
    """

    def estimate(
        self,
        track: Sequence[GPSTrackPoint],
        params: Optional[WingProfile] = None
    ) -> Optional[WindEstimation]:
        """Estimate wind using the speed-variation algorithm."""
        if params is None:
            params = WingProfile()

        from core.wind.algorithms import estimate_wind_from_speed_variation

        return estimate_wind_from_speed_variation(
            track=track,
            wing_type=params.wing_type,
            wing_size=params.wing_size,
            pilot_weight=params.pilot_weight
        )

    @property
    def name(self) -> str:
        return "Speed variation"

    @property
    def description(self) -> str:
        return "Infers wind from the spread of median ground speed across compass headings"


class WindEstimationFactory:
    """Factory for creating wind estimation algorithms."""

    _estimators: Dict[str, Type[WindEstimator]] = {
        SPEED_VARIATION_METHOD: SpeedVariationWindEstimator,
    }

    @classmethod
    def create_estimator(cls, method: str) -> WindEstimator:
        """
        Create a wind estimator for the specified method.

        Args:
            method: Algorithm method ('speed_variation')

        Returns:
            WindEstimator instance
        """
        method_lower = (method or '').lower()

        # Default to speed variation for unknown methods
        if method_lower not in cls._estimators:
            method_lower = cls.get_default_method()

        return cls._estimators[method_lower]()

    @classmethod
    def get_available_methods(cls) -> Dict[str, str]:
        """Get available estimation methods with descriptions."""
        result = {}
        for method_name, estimator_class in cls._estimators.items():
            estimator = estimator_class()
            result[method_name] = f"{estimator.name}: {estimator.description}"
        return result

    @classmethod
    def get_default_method(cls) -> str:
        """Method used when none or an unknown one is requested."""
        return SPEED_VARIATION_METHOD


def estimate_wind(
    track: Sequence[GPSTrackPoint],
    method: str = SPEED_VARIATION_METHOD,
    params: Optional[WingProfile] = None
) -> Optional[WindEstimation]:
    """
    Convenience function to estimate the wind using any algorithm.

    Args:
        track: Chronologically ordered GPS samples of one flight
        method: Algorithm to use (defaults to 'speed_variation')
        params: Optional wing and pilot metadata

    Returns:
        WindEstimation, or None if the track cannot support an estimate
    """
    estimator = WindEstimationFactory.create_estimator(method)
    return estimator.estimate(track, params)
