"""
Shared fixtures for building synthetic flight tracks.
"""

import pytest
import gpxpy.gpx
from datetime import datetime, timedelta, timezone
from geopy.distance import geodesic

from core.models.track import GPSTrackPoint

START_POSITION = (45.9, 6.4)
BASE_TIME = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

# Ground speeds (m/s) by octant N, NE, E, SE, S, SW, W, NW for a 3.5 m/s
# wind blowing from the south
SOUTH_WIND_SPEEDS = [12.0, 10.0, 8.0, 6.0, 5.0, 6.0, 8.0, 10.0]


def build_track(legs, interval=5.0, start=START_POSITION, start_time=BASE_TIME):
    """
    Build a track from (bearing, ground speed, sample count) legs.

    Every sample after the first is placed speed * interval meters along its
    leg's bearing, so each step's heading and recorded speed are those of the
    leg it belongs to.
    """
    lat, lon = start
    timestamp = start_time
    points = [GPSTrackPoint(latitude=lat, longitude=lon, timestamp=timestamp,
                            speed=legs[0][1], altitude=1200.0)]

    for bearing, speed, count in legs:
        for _ in range(count):
            destination = geodesic(meters=speed * interval).destination((lat, lon), bearing)
            lat, lon = destination.latitude, destination.longitude
            timestamp = timestamp + timedelta(seconds=interval)
            points.append(GPSTrackPoint(latitude=lat, longitude=lon, timestamp=timestamp,
                                        speed=speed, altitude=1200.0))

    return points


def build_gpx(points, version="1.0", with_speed=True, name="Morning flight"):
    """Serialize track points to GPX text with gpxpy."""
    gpx = gpxpy.gpx.GPX()
    track = gpxpy.gpx.GPXTrack(name=name)
    gpx.tracks.append(track)
    segment = gpxpy.gpx.GPXTrackSegment()
    track.segments.append(segment)

    for point in points:
        segment.points.append(gpxpy.gpx.GPXTrackPoint(
            point.latitude,
            point.longitude,
            elevation=point.altitude,
            time=point.timestamp,
            speed=point.speed if with_speed else None
        ))

    return gpx.to_xml(version=version)


def circle_legs(speeds_by_octant, samples=3):
    """One leg per octant heading, in compass order."""
    return [(octant * 45.0, speed, samples) for octant, speed in enumerate(speeds_by_octant)]


@pytest.fixture
def make_track():
    return build_track


@pytest.fixture
def make_gpx():
    return build_gpx


@pytest.fixture
def make_circle_track():
    def _make(speeds_by_octant, samples=3, interval=5.0):
        return build_track(circle_legs(speeds_by_octant, samples), interval=interval)
    return _make


@pytest.fixture
def south_wind_track():
    """8-direction circuit, 3 samples per octant, fastest heading north."""
    return build_track(circle_legs(SOUTH_WIND_SPEEDS, samples=3))


@pytest.fixture
def north_wind_track():
    """Mirror of south_wind_track: fastest heading south."""
    mirrored = SOUTH_WIND_SPEEDS[4:] + SOUTH_WIND_SPEEDS[:4]
    return build_track(circle_legs(mirrored, samples=3))


@pytest.fixture
def straight_track():
    """200 samples flown due east."""
    return build_track([(90.0, 10.0, 199)])
