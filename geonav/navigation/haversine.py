"""Great-circle navigation on a spherical earth.

Implements the haversine distance, initial and final bearing, midpoint and
destination-point formulas on a sphere of mean earth radius.

Notation (angles in radians inside the formulas):
    φ = latitude, λ = longitude, θ = bearing (clockwise from north),
    δ = angular distance d / R.

Inputs and outputs are in decimal degrees and meters. No range checks are
applied; an out-of-range latitude gives a defined but meaningless result.

References:
    http://www.movable-type.co.uk/scripts/latlong.html
"""

from typing import Sequence

import numpy as np

from geonav.coords.frames import LatLon, as_vector
from geonav.utils.angles import deg_to_rad, fmod, rad_to_deg

# Mean radius of the earth (m)
EARTH_MEAN_RADIUS = 6371000.0


def _normalize_lon(lon_deg: float) -> float:
    """Wrap a longitude into [-180, 180) via the shift-by-540 form."""
    return fmod(lon_deg + 540.0, 360.0) - 180.0


def haversine_distance(
    pt1: Sequence[float],
    pt2: Sequence[float],
    radius: float = EARTH_MEAN_RADIUS,
) -> float:
    """Great-circle distance between two points.

    a = sin²(Δφ/2) + cos φ1 ⋅ cos φ2 ⋅ sin²(Δλ/2)
    c = 2 ⋅ atan2(√a, √(1−a))
    d = R ⋅ c

    Args:
        pt1: Start point (lat°, lon°).
        pt2: End point (lat°, lon°).
        radius: Sphere radius in meters.

    Returns:
        Distance along the great circle in meters.

    Example:
        >>> haversine_distance((55.9987, -2.71), (56.001, -2.734))  # ~1514 m
    """
    lat1, lon1 = deg_to_rad(as_vector(pt1, 2))
    lat2, lon2 = deg_to_rad(as_vector(pt2, 2))

    sin_half_dlat = np.sin((lat2 - lat1) / 2.0)
    sin_half_dlon = np.sin((lon2 - lon1) / 2.0)

    a = sin_half_dlat**2 + np.cos(lat1) * np.cos(lat2) * sin_half_dlon**2
    # rounding can push a past 1 for (near-)antipodal points
    a = np.clip(a, 0.0, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return float(radius * c)


distance = haversine_distance


def initial_bearing(pt1: Sequence[float], pt2: Sequence[float]) -> float:
    """Initial bearing on the great-circle path from pt1 to pt2.

    θ = atan2(sin Δλ ⋅ cos φ2, cos φ1 ⋅ sin φ2 − sin φ1 ⋅ cos φ2 ⋅ cos Δλ)

    The atan2 result in (-180°, 180°] is shifted into [0°, 360°) by adding
    360° to negative values. A sum that rounds to 360° is reported as 0°.
    The bearing is arbitrary when pt1 == pt2.

    Args:
        pt1: Start point (lat°, lon°).
        pt2: End point (lat°, lon°).

    Returns:
        Compass bearing in degrees, clockwise from north.
    """
    lat1, lon1 = deg_to_rad(as_vector(pt1, 2))
    lat2, lon2 = deg_to_rad(as_vector(pt2, 2))

    dlon = lon2 - lon1
    y = np.sin(dlon) * np.cos(lat2)
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)

    bearing = float(rad_to_deg(np.arctan2(y, x)))
    if bearing < 0.0:
        bearing += 360.0
    # a tiny negative angle rounds up to exactly 360
    if bearing == 360.0:
        return 0.0
    return bearing


def final_bearing(pt1: Sequence[float], pt2: Sequence[float]) -> float:
    """Bearing on arrival at pt2 when travelling the great circle from pt1.

    This is the reverse initial bearing from pt2 to pt1, turned by 180°.
    """
    return fmod(initial_bearing(pt2, pt1) + 180.0, 360.0)


def midpoint(pt1: Sequence[float], pt2: Sequence[float]) -> LatLon:
    """Half-way point along the great circle between two points.

    Args:
        pt1: Start point (lat°, lon°).
        pt2: End point (lat°, lon°).

    Returns:
        Midpoint (lat°, lon°) with longitude in [-180, 180).
    """
    lat1, lon1 = deg_to_rad(as_vector(pt1, 2))
    lat2, lon2 = deg_to_rad(as_vector(pt2, 2))

    dlon = lon2 - lon1
    bx = np.cos(lat2) * np.cos(dlon)
    by = np.cos(lat2) * np.sin(dlon)

    lat_m = np.arctan2(
        np.sin(lat1) + np.sin(lat2),
        np.sqrt((np.cos(lat1) + bx) ** 2 + by**2),
    )
    lon_m = lon1 + np.arctan2(by, np.cos(lat1) + bx)

    return LatLon(float(rad_to_deg(lat_m)), _normalize_lon(float(rad_to_deg(lon_m))))


def destination(
    start: Sequence[float],
    bearing: float,
    distance: float,
    radius: float = EARTH_MEAN_RADIUS,
) -> LatLon:
    """Destination point given a start, initial bearing and distance.

    φ2 = asin(sin φ1 ⋅ cos δ + cos φ1 ⋅ sin δ ⋅ cos θ)
    λ2 = λ1 + atan2(sin θ ⋅ sin δ ⋅ cos φ1, cos δ − sin φ1 ⋅ sin φ2)

    The resulting longitude is normalized with fmod(λ + 540, 360) - 180,
    using truncating fmod.

    Args:
        start: Start point (lat°, lon°).
        bearing: Initial bearing in degrees, clockwise from north.
        distance: Distance travelled along the great circle in meters.
        radius: Sphere radius in meters.

    Returns:
        Destination (lat°, lon°).

    Example:
        >>> destination((55.9987, -2.71), 279.735, 1514)  # ~(56.001, -2.734)
    """
    lat1, lon1 = deg_to_rad(as_vector(start, 2))
    theta = deg_to_rad(bearing)
    delta = distance / radius

    lat2 = np.arcsin(
        np.sin(lat1) * np.cos(delta) + np.cos(lat1) * np.sin(delta) * np.cos(theta)
    )
    lon2 = lon1 + np.arctan2(
        np.sin(theta) * np.sin(delta) * np.cos(lat1),
        np.cos(delta) - np.sin(lat1) * np.sin(lat2),
    )

    # Convert back to degrees and normalise longitude
    return LatLon(float(rad_to_deg(lat2)), _normalize_lon(float(rad_to_deg(lon2))))
