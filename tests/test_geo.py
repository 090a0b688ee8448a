import math

import pytest

from places_autocomplete.geo import EARTH_RADIUS_M, bounds_around, miles_to_meters, meters_to_lat_deg


def _great_circle_m(lat1, lon1, lat2, lon2):
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    a = (
        math.sin((phi2 - phi1) / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(math.radians(lon2 - lon1) / 2) ** 2
    )
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(a))


def test_miles_to_meters():
    assert miles_to_meters(1) == pytest.approx(1609.344)


def test_meters_to_lat_deg_one_degree():
    assert meters_to_lat_deg(111195.0) == pytest.approx(1.0, rel=1e-3)


def test_bounds_around_is_centered():
    b = bounds_around(47.6, -122.3, 10_000)

    assert b.south < 47.6 < b.north
    assert b.west < -122.3 < b.east
    assert (b.north + b.south) / 2 == pytest.approx(47.6)
    assert (b.east + b.west) / 2 == pytest.approx(-122.3)


def test_bounds_around_encloses_radius():
    lat, lon, r = 33.0, -96.7, 16_000
    b = bounds_around(lat, lon, r)

    assert _great_circle_m(lat, lon, b.north, lon) == pytest.approx(r, rel=1e-3)
    assert _great_circle_m(lat, lon, lat, b.east) == pytest.approx(r, rel=1e-2)


def test_bounds_around_clamps_latitude():
    b = bounds_around(89.99, 0.0, 50_000)
    assert b.north == 90.0
