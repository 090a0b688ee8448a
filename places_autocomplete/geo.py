# places_autocomplete/geo.py
import math

from .models import Bounds

EARTH_RADIUS_M = 6371000.0

def miles_to_meters(mi: float) -> float:
    return mi * 1609.344

def meters_to_lat_deg(m: float) -> float:
    return (m / EARTH_RADIUS_M) * (180.0 / math.pi)

def meters_to_lon_deg(m: float, at_lat_deg: float) -> float:
    lat_rad = math.radians(at_lat_deg)
    return (m / (EARTH_RADIUS_M * max(0.000001, math.cos(lat_rad)))) * (180.0 / math.pi)

def bounds_around(lat: float, lon: float, radius_m: float) -> Bounds:
    """
    Square box enclosing a circle of radius_m around (lat, lon).
    Latitudes are clamped to [-90, 90]; longitudes are left unwrapped.
    """
    dlat = meters_to_lat_deg(radius_m)
    dlon = meters_to_lon_deg(radius_m, lat)
    return Bounds(
        south=max(-90.0, lat - dlat),
        west=lon - dlon,
        north=min(90.0, lat + dlat),
        east=lon + dlon,
    )
