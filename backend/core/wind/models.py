"""
Wind models and data structures.

This module contains the wind estimate produced for a flight and the helpers
that turn it into display strings (knots or km/h, cardinal labels).
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple

from core.calculations import (
    meters_per_second_to_knots, meters_per_second_to_kmh, direction_to_cardinal,
    normalize_angle
)
from core.constants import (
    RELIABLE_CONFIDENCE_THRESHOLD, APPROXIMATE_CONFIDENCE_THRESHOLD,
    SPEED_VARIATION_METHOD, UNRESOLVED_WIND_SPEED_MAX_MS, UNRESOLVED_WIND_CONFIDENCE
)

SPEED_UNITS = ('knots', 'kmh')
UNIT_LABELS = {'knots': 'kn', 'kmh': 'km/h'}
DEFAULT_SPEED_UNIT = 'knots'


def convert_speed(speed_ms: float, unit: str = DEFAULT_SPEED_UNIT) -> float:
    """Convert a speed in m/s to the display unit ('knots' or 'kmh')."""
    if unit == 'knots':
        return meters_per_second_to_knots(speed_ms)
    return meters_per_second_to_kmh(speed_ms)


def unit_label(unit: str = DEFAULT_SPEED_UNIT) -> str:
    """Short label for a display unit; anything but knots renders as km/h."""
    return UNIT_LABELS['knots'] if unit == 'knots' else UNIT_LABELS['kmh']


@dataclass(frozen=True)
class WindEstimation:
    """Wind speed and direction inferred from a single flight."""
    speed: float  # m/s
    speed_min: float  # m/s
    speed_max: float  # m/s
    direction: float  # Degrees the wind blows from (0-360)
    confidence: float  # 0.0 - 1.0
    method: str = SPEED_VARIATION_METHOD

    def __post_init__(self):
        # Normalize direction to 0-359 range
        object.__setattr__(self, 'direction', normalize_angle(self.direction))

    @property
    def speed_kmh(self) -> float:
        return meters_per_second_to_kmh(self.speed)

    @property
    def speed_min_kmh(self) -> float:
        return meters_per_second_to_kmh(self.speed_min)

    @property
    def speed_max_kmh(self) -> float:
        return meters_per_second_to_kmh(self.speed_max)

    @property
    def speed_knots(self) -> float:
        return meters_per_second_to_knots(self.speed)

    @property
    def speed_min_knots(self) -> float:
        return meters_per_second_to_knots(self.speed_min)

    @property
    def speed_max_knots(self) -> float:
        return meters_per_second_to_knots(self.speed_max)

    @property
    def direction_cardinal(self) -> str:
        """Cardinal direction (N, NE, E, etc.) the wind comes from."""
        return direction_to_cardinal(self.direction)

    @property
    def confidence_level(self) -> str:
        """Human-readable confidence level."""
        if self.confidence >= RELIABLE_CONFIDENCE_THRESHOLD:
            return "Reliable"
        if self.confidence >= APPROXIMATE_CONFIDENCE_THRESHOLD:
            return "Approximate"
        return "Uncertain"

    def _rounded(self, unit: str) -> Tuple[int, int, int]:
        return (
            int(round(convert_speed(self.speed, unit))),
            int(round(convert_speed(self.speed_min, unit))),
            int(round(convert_speed(self.speed_max, unit))),
        )

    def formatted_speed(self, unit: str = DEFAULT_SPEED_UNIT) -> str:
        """
        Format the speed for display, e.g. "12 kn" or "12 ±3 kn".

        The ± form is only used when the rounded range spans more than
        2 units.
        """
        avg, low, high = self._rounded(unit)
        label = unit_label(unit)

        if high - low <= 2:
            return f"{avg} {label}"
        return f"{avg} ±{high - avg} {label}"

    def formatted_range(self, unit: str = DEFAULT_SPEED_UNIT) -> str:
        """Format the speed range for display, e.g. "9-15 kn"."""
        _, low, high = self._rounded(unit)
        return f"{low}-{high} {unit_label(unit)}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'speed': round(self.speed, 2),
            'speed_min': round(self.speed_min, 2),
            'speed_max': round(self.speed_max, 2),
            'direction': round(self.direction, 1),
            'direction_cardinal': self.direction_cardinal,
            'confidence': round(self.confidence, 3),
            'confidence_level': self.confidence_level,
            'method': self.method,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WindEstimation':
        """Create WindEstimation from dictionary."""
        return cls(
            speed=data['speed'],
            speed_min=data['speed_min'],
            speed_max=data['speed_max'],
            direction=data['direction'],
            confidence=data['confidence'],
            method=data.get('method', SPEED_VARIATION_METHOD)
        )

    @classmethod
    def unresolved(cls) -> 'WindEstimation':
        """Wind present but below what GPS ground speed can resolve."""
        return cls(
            speed=0.0,
            speed_min=0.0,
            speed_max=UNRESOLVED_WIND_SPEED_MAX_MS,
            direction=0.0,
            confidence=UNRESOLVED_WIND_CONFIDENCE
        )


def format_flight_wind(speed: Optional[float], direction: Optional[float] = None,
                       unit: str = DEFAULT_SPEED_UNIT) -> Optional[str]:
    """
    Format the wind stored on a flight record, e.g. "12 kn SW".

    Args:
        speed: Stored wind speed in m/s
        direction: Stored wind direction in degrees, if any
        unit: 'knots' or 'kmh'

    Returns:
        Display string, or None when no wind was measured
    """
    if speed is None or speed <= 0:
        return None

    value = int(round(convert_speed(speed, unit)))
    label = unit_label(unit)

    if direction is not None:
        return f"{value} {label} {direction_to_cardinal(direction)}"
    return f"{value} {label}"


def format_flight_wind_range(speed_min: Optional[float], speed_max: Optional[float],
                             unit: str = DEFAULT_SPEED_UNIT) -> Optional[str]:
    """Format the wind range stored on a flight record, e.g. "9-15 kn"."""
    if speed_min is None or speed_max is None:
        return None

    low = int(round(convert_speed(speed_min, unit)))
    high = int(round(convert_speed(speed_max, unit)))
    return f"{low}-{high} {unit_label(unit)}"
