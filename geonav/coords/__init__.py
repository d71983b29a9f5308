"""Coordinate systems and transformations.

This module provides functions and classes for working with the coordinate
frames used in geodetic positioning:
- LLA (Latitude, Longitude, Altitude) geodetic coordinates on WGS84
- ECEF (Earth-Centered Earth-Fixed) Cartesian coordinates
- ENU (East-North-Up) local tangent plane coordinates
- Vector angles and straight-line distances between Cartesian points
"""

from geonav.coords.frames import ECEF, ENU, LLA, LatLon
from geonav.coords.transforms import (
    WGS84_A,
    WGS84_B,
    WGS84_E2,
    ecef_to_enu,
    ecef_to_lla,
    enu_to_ecef,
    lla_to_ecef,
    lla_to_enu,
)
from geonav.coords.vectors import (
    calc_angle,
    dot_product,
    ecef_distance,
    enu_distance,
    vec_mag,
)

__all__ = [
    # Point types
    "LLA",
    "ECEF",
    "ENU",
    "LatLon",
    # Transforms
    "WGS84_A",
    "WGS84_B",
    "WGS84_E2",
    "lla_to_ecef",
    "ecef_to_lla",
    "ecef_to_enu",
    "enu_to_ecef",
    "lla_to_enu",
    # Vectors
    "dot_product",
    "vec_mag",
    "calc_angle",
    "ecef_distance",
    "enu_distance",
]
