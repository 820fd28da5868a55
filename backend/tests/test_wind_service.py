"""
Tests for the flight wind service and track analysis service.
"""

import io
import pytest

from core.models.track import track_to_dataframe
from core.wind.factory import WingProfile
from services.wind_service import WindService, get_wind_service, parse_wing_size
from services.track_analysis_service import (
    analyze_track_data, analyze_track_file, calculate_track_summary, calculate_octant_breakdown
)


class TestParseWingSize:
    """Tests for parse_wing_size function."""

    @pytest.mark.parametrize("text,expected", [
        ("18", 18.0),
        ("18m²", 18.0),
        ("18 m2", 18.0),
        ("18,5 m²", 18.5),
        ("22 M2", 22.0),
        ("M 22", 22.0),
        ("M (22-24)", 22.0),
        ("1.2.3", 1.2),
        ("19.5", 19.5),
        (21, 21.0),
        (17.5, 17.5),
    ])
    def test_readable_sizes(self, text, expected):
        assert parse_wing_size(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", [None, "", "abc", "m²", "0", 0, -4])
    def test_unreadable_sizes(self, text):
        assert parse_wing_size(text) is None


class TestWindService:
    """Tests for WindService."""

    def test_estimate_uses_profile(self, south_wind_track):
        service = get_wind_service()
        result = service.estimate(south_wind_track, WingProfile(wing_size=20.0, pilot_weight=100.0))
        assert result.confidence == pytest.approx(1.0)

    def test_estimate_for_flight_parses_size(self, south_wind_track):
        result = WindService().estimate_for_flight(
            south_wind_track, wing_type=None, wing_size="20 m²", pilot_weight=100.0
        )
        assert result.speed == pytest.approx(3.5)
        assert result.confidence == pytest.approx(1.0)

    def test_non_positive_weight_means_unknown(self, south_wind_track):
        result = WindService().estimate_for_flight(south_wind_track, pilot_weight=0)
        assert result.confidence == pytest.approx(0.92 * 0.9)

    @pytest.mark.parametrize("track", [None, []])
    def test_missing_track_gives_none(self, track):
        assert WindService().estimate_for_flight(track) is None

    def test_flight_fields_without_estimate(self):
        fields = WindService.flight_fields(None)
        assert set(fields) == {
            'wind_speed', 'wind_speed_min', 'wind_speed_max', 'wind_direction', 'wind_confidence'
        }
        assert all(value is None for value in fields.values())

    def test_flight_fields_with_estimate(self, south_wind_track):
        estimation = WindService().estimate_for_flight(south_wind_track)
        fields = WindService.flight_fields(estimation)
        assert fields['wind_speed'] == pytest.approx(3.5)
        assert fields['wind_direction'] == pytest.approx(180.0)
        assert fields['wind_speed_min'] < fields['wind_speed'] < fields['wind_speed_max']
        assert fields['wind_confidence'] == pytest.approx(estimation.confidence)


class TestTrackAnalysis:
    """Tests for the track analysis service."""

    def test_track_summary(self, south_wind_track):
        summary = calculate_track_summary(south_wind_track)
        assert summary['point_count'] == 25
        assert summary['duration_seconds'] == pytest.approx(120.0)
        # 3 samples of 5 s per leg: (12+10+8+6+5+6+8+10) * 15 m
        assert summary['total_distance_km'] == pytest.approx(0.975, rel=1e-3)
        assert summary['max_speed_knots'] == pytest.approx(12.0 * 1.94384)

    def test_summary_of_single_point(self, south_wind_track):
        summary = calculate_track_summary(south_wind_track[:1])
        assert summary['point_count'] == 1
        assert summary['duration_seconds'] == 0.0

    def test_octant_breakdown(self, south_wind_track):
        octants = calculate_octant_breakdown(south_wind_track)
        assert [o['label'] for o in octants] == ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
        assert all(o['samples'] == 3 for o in octants)
        assert octants[0]['median_speed'] == pytest.approx(12.0)

    def test_octant_breakdown_of_straight_line(self, straight_track):
        octants = calculate_octant_breakdown(straight_track)
        assert octants[2]['samples'] == 199
        assert octants[0]['median_speed'] is None

    def test_analyze_track_data(self, south_wind_track):
        result = analyze_track_data(track_to_dataframe(south_wind_track), filename="flight.gpx",
                                    wing_type="Cross", wing_size="22", pilot_weight=90.0)
        assert result.has_estimate
        assert result.reason is None
        assert result.profile.wing_size == 22.0
        assert result.wind_estimate.direction == pytest.approx(180.0)

    def test_analyze_straight_line_explains_missing_estimate(self, straight_track):
        result = analyze_track_data(track_to_dataframe(straight_track))
        assert not result.has_estimate
        assert result.reason is not None
        assert result.summary['point_count'] == 200

    def test_analyze_track_file(self, south_wind_track, make_gpx):
        result = analyze_track_file(io.StringIO(make_gpx(south_wind_track)), wing_type="Soaring")
        assert result.has_estimate
        assert result.filename == "uploaded_track.gpx"
        assert result.metadata['name'] == "Morning flight"
