"""Geodetic coordinate conversions and great-circle navigation.

This package contains small, stateless building blocks for positioning math:
- utils: Angle and unit utilities (degrees/radians, DMS, modulo)
- coords: WGS84 LLA/ECEF/ENU transformations and vector geometry
- navigation: Spherical-earth (haversine) distance, bearing and destination
"""

__version__ = "0.1.0"
