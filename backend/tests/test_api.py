"""
Tests for the FastAPI backend.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def track_payload(points, **fields):
    payload = {
        'points': [
            {
                'latitude': p.latitude,
                'longitude': p.longitude,
                'timestamp': p.timestamp.isoformat(),
                'speed': p.speed,
                'altitude': p.altitude,
            }
            for p in points
        ]
    }
    payload.update(fields)
    return payload


class TestInfoEndpoints:
    """Tests for the informational endpoints."""

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "wind-lab-api"}

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "POST /api/estimate-wind" in response.json()['endpoints']

    def test_config(self, client):
        data = client.get("/api/config").json()
        assert data['trim']['trim_speeds_kmh']['Cross'] == 40.0
        assert data['units'] == ["knots", "kmh"]
        assert data['default_unit'] == "knots"


class TestEstimateFromTrack:
    """Tests for POST /api/estimate-wind/track."""

    def test_estimate(self, client, south_wind_track):
        response = client.post("/api/estimate-wind/track", json=track_payload(south_wind_track))
        assert response.status_code == 200

        data = response.json()
        estimate = data['estimate']
        assert estimate['speed'] == pytest.approx(3.5)
        assert estimate['direction'] == pytest.approx(180.0)
        assert estimate['direction_cardinal'] == "S"
        assert estimate['method'] == "speed_variation"
        assert estimate['formatted_speed'].endswith(" kn")
        assert data['reason'] is None
        assert len(data['octants']) == 8
        assert data['track_summary']['point_count'] == 25

    def test_kmh_formatting(self, client, south_wind_track):
        payload = track_payload(south_wind_track, unit="kmh", wing_size="20 m²", pilot_weight=100)
        data = client.post("/api/estimate-wind/track", json=payload).json()
        assert data['estimate']['formatted_speed'].endswith(" km/h")
        assert data['estimate']['confidence'] == pytest.approx(1.0)
        assert data['estimate']['confidence_level'] == "Reliable"

    def test_straight_line_has_no_estimate(self, client, straight_track):
        response = client.post("/api/estimate-wind/track", json=track_payload(straight_track))
        assert response.status_code == 200
        data = response.json()
        assert data['estimate'] is None
        assert data['reason']

    def test_unknown_unit_rejected(self, client, south_wind_track):
        payload = track_payload(south_wind_track, unit="mph")
        assert client.post("/api/estimate-wind/track", json=payload).status_code == 400

    def test_empty_track_rejected(self, client):
        assert client.post("/api/estimate-wind/track", json={'points': []}).status_code == 400

    def test_invalid_weight_rejected(self, client, south_wind_track):
        payload = track_payload(south_wind_track, pilot_weight="heavy")
        assert client.post("/api/estimate-wind/track", json=payload).status_code == 422

    def test_out_of_range_latitude_rejected(self, client, south_wind_track):
        payload = track_payload(south_wind_track)
        payload['points'][0]['latitude'] = 95.0
        assert client.post("/api/estimate-wind/track", json=payload).status_code == 422

    def test_mixed_time_zones_rejected(self, client, south_wind_track):
        payload = track_payload(south_wind_track)
        for i, p in enumerate(south_wind_track):
            if i % 2:
                payload['points'][i]['timestamp'] = p.timestamp.replace(tzinfo=None).isoformat()

        response = client.post("/api/estimate-wind/track", json=payload)
        assert response.status_code == 400
        assert "time zone" in response.json()['detail']


class TestEstimateFromFile:
    """Tests for POST /api/estimate-wind."""

    def test_gpx_upload(self, client, south_wind_track, make_gpx):
        content = make_gpx(south_wind_track).encode('utf-8')
        response = client.post(
            "/api/estimate-wind",
            files={'file': ("flight.gpx", content, "application/gpx+xml")},
            params={'wing_type': "Thermal", 'wing_size': "21", 'pilot_weight': 95}
        )
        assert response.status_code == 200
        data = response.json()
        assert data['estimate']['direction'] == pytest.approx(180.0)
        assert data['track_summary']['filename'] == "flight.gpx"

    def test_non_gpx_rejected(self, client):
        response = client.post("/api/estimate-wind",
                               files={'file': ("flight.csv", b"lat,lon\n" * 50, "text/csv")})
        assert response.status_code == 400

    def test_tiny_file_rejected(self, client):
        response = client.post("/api/estimate-wind",
                               files={'file': ("flight.gpx", b"<gpx/>", "application/gpx+xml")})
        assert response.status_code == 400

    def test_corrupt_gpx_rejected(self, client):
        content = b"<?xml version='1.0'?><gpx><trk><trkseg><trkpt lat=" + b"x" * 200
        response = client.post("/api/estimate-wind",
                               files={'file': ("flight.gpx", content, "application/gpx+xml")})
        assert response.status_code == 400

    def test_negative_weight_is_ignored(self, client, south_wind_track, make_gpx):
        content = make_gpx(south_wind_track).encode('utf-8')
        response = client.post(
            "/api/estimate-wind",
            files={'file': ("flight.gpx", content, "application/gpx+xml")},
            params={'pilot_weight': -5}
        )
        assert response.status_code == 200
        assert response.json()['estimate']['confidence'] == pytest.approx(0.92 * 0.9)
