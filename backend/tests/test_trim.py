"""
Tests for the wing trim-speed model.
"""

import pytest

from core.wind.trim import base_trim_speed, wing_loading, expected_airspeed


class TestBaseTrimSpeed:
    """Tests for base_trim_speed function."""

    @pytest.mark.parametrize("wing_type,kmh", [
        ("Soaring", 36.0),
        ("Cross", 40.0),
        ("Thermal", 38.0),
        ("Speedflying", 50.0),
        ("Acro", 42.0),
    ])
    def test_known_wing_types(self, wing_type, kmh):
        assert base_trim_speed(wing_type) == pytest.approx(kmh / 3.6)

    @pytest.mark.parametrize("wing_type", [None, "", "Tandem", "soaring"])
    def test_unknown_wing_type_uses_default(self, wing_type):
        assert base_trim_speed(wing_type) == pytest.approx(37.0 / 3.6)


class TestWingLoading:
    """Tests for wing_loading function."""

    def test_loading_is_weight_over_area(self):
        assert wing_loading(90.0, 18.0) == pytest.approx(5.0)

    @pytest.mark.parametrize("weight,size", [(None, 18.0), (90.0, None), (0.0, 18.0), (90.0, 0.0)])
    def test_missing_inputs_give_none(self, weight, size):
        assert wing_loading(weight, size) is None


class TestExpectedAirspeed:
    """Tests for expected_airspeed function."""

    def test_reference_loading_leaves_trim_unchanged(self):
        assert expected_airspeed("Cross", 20.0, 100.0) == pytest.approx(40.0 / 3.6)

    def test_higher_loading_flies_faster(self):
        # 110 kg on 20 m² is 5.5 kg/m², +1.5%
        assert expected_airspeed("Cross", 20.0, 110.0) == pytest.approx(40.0 / 3.6 * 1.015)

    def test_lower_loading_flies_slower(self):
        # 80 kg on 20 m² is 4 kg/m², -3%
        assert expected_airspeed("Cross", 20.0, 80.0) == pytest.approx(40.0 / 3.6 * 0.97)

    def test_partial_profile_uses_base_trim(self):
        assert expected_airspeed("Acro", None, 85.0) == pytest.approx(42.0 / 3.6)
        assert expected_airspeed("Acro", 16.0, None) == pytest.approx(42.0 / 3.6)

    def test_no_profile_uses_default(self):
        assert expected_airspeed() == pytest.approx(37.0 / 3.6)
