"""
Tests for the wind solver.
"""

import math
import pytest

from core.models.segment import FlightSegment
from core.wind.solver import solve_wind, is_below_resolution


def segments_with_speeds(speeds):
    return [FlightSegment(heading=0.0, ground_speed=s, duration=1.0) for s in speeds]


class TestSolveWind:
    """Tests for solve_wind function."""

    def test_speed_is_half_the_spread(self):
        solution = solve_wind((0, 12.0), (4, 5.0), segments_with_speeds([12.0, 5.0]), 8.5)
        assert solution.speed == pytest.approx(3.5)

    @pytest.mark.parametrize("max_octant,direction", [(0, 180.0), (2, 270.0), (4, 0.0), (5, 45.0)])
    def test_direction_opposes_fastest_heading(self, max_octant, direction):
        solution = solve_wind((max_octant, 12.0), ((max_octant + 4) % 8, 6.0),
                              segments_with_speeds([12.0, 6.0]), 9.0)
        assert solution.direction == pytest.approx(direction)

    def test_estimated_airspeed_and_trim_delta(self):
        solution = solve_wind((0, 12.0), (4, 6.0), segments_with_speeds([12.0, 6.0]), 10.0)
        assert solution.estimated_airspeed == pytest.approx(9.0)
        assert solution.trim_delta == pytest.approx(1.0)

    def test_uncertainty_band(self):
        speeds = [12.0, 6.0]  # population variance 9, std 3
        solution = solve_wind((0, 12.0), (4, 6.0), segments_with_speeds(speeds), 10.0)
        spread = 3.0 * 0.5 + 1.0 * 0.3
        assert solution.variance == pytest.approx(9.0)
        assert solution.std_dev == pytest.approx(3.0)
        assert solution.speed_min == pytest.approx(3.0 - spread)
        assert solution.speed_max == pytest.approx(3.0 + spread)

    def test_lower_bound_never_negative(self):
        speeds = [2.0, 30.0, 2.0, 30.0]
        solution = solve_wind((0, 9.0), (4, 7.0), segments_with_speeds(speeds), 8.0)
        assert solution.speed == pytest.approx(1.0)
        assert solution.speed_min == 0.0
        assert solution.speed_max > solution.speed

    def test_band_contains_speed(self):
        solution = solve_wind((1, 14.0), (5, 7.0), segments_with_speeds([14.0, 7.0, 10.0]), 10.0)
        assert solution.speed_min <= solution.speed <= solution.speed_max
        assert not math.isnan(solution.speed_max)


class TestResolution:
    """Tests for is_below_resolution function."""

    def test_below_one_meter_per_second(self):
        assert is_below_resolution(0.99)
        assert not is_below_resolution(1.0)

    def test_solution_resolvability(self):
        solution = solve_wind((0, 9.0), (4, 8.0), segments_with_speeds([9.0, 8.0]), 8.5)
        assert solution.speed == pytest.approx(0.5)
        assert not solution.is_resolvable
