"""Coordinate transformations between LLA, ECEF, and ENU frames.

This module implements transformations between geodetic (LLA),
Earth-Centered Earth-Fixed (ECEF), and local East-North-Up (ENU)
coordinate systems.

WGS84 ellipsoid parameters:
- Semi-major axis (a): 6378137.0 m
- Semi-minor axis (b): 6356752.31424518 m
- First eccentricity squared (e²): (a² - b²) / a²

Altitudes are heights above the WGS84 ellipsoid. No geoid model is applied,
so heights referenced to mean sea level must be corrected by the caller.

All angles are in decimal degrees.
"""

import warnings
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from geonav.coords.frames import ECEF, ENU, LLA, as_vector
from geonav.utils.angles import deg_to_rad, rad_to_deg

# WGS84 ellipsoid parameters
WGS84_A = 6378137.0  # Semi-major axis (m)
WGS84_B = 6356752.31424518  # Semi-minor axis (m)
WGS84_E2 = (WGS84_A**2 - WGS84_B**2) / WGS84_A**2  # First eccentricity squared


def _enu_rotation(lat_ref: float, lon_ref: float) -> NDArray[np.float64]:
    """Rotation matrix from ECEF to ENU at the given reference (degrees)."""
    lat = deg_to_rad(lat_ref)
    lon = deg_to_rad(lon_ref)

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    return np.array(
        [
            [-sin_lon, cos_lon, 0.0],
            [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
            [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
        ],
        dtype=np.float64,
    )


def lla_to_ecef(lat: float, lon: float, alt: float) -> ECEF:
    """Convert geodetic coordinates (LLA) to ECEF Cartesian coordinates.

    Args:
        lat: Latitude in degrees (positive north).
        lon: Longitude in degrees (positive east).
        alt: Height above the WGS84 ellipsoid in meters.

    Returns:
        ECEF point (x, y, z) in meters.

    Example:
        >>> # Greenwich Observatory: 51.4769°N, 0°E, 0m
        >>> xyz = lla_to_ecef(51.4769, 0.0, 0.0)
        >>> print(f"ECEF: {xyz}")
    """
    lat_rad = deg_to_rad(lat)
    lon_rad = deg_to_rad(lon)

    sin_lat = np.sin(lat_rad)
    cos_lat = np.cos(lat_rad)

    # Radius of curvature in the prime vertical
    N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)

    x = (N + alt) * cos_lat * np.cos(lon_rad)
    y = (N + alt) * cos_lat * np.sin(lon_rad)
    z = ((WGS84_B**2 / WGS84_A**2) * N + alt) * sin_lat

    return ECEF(float(x), float(y), float(z))


def ecef_to_lla(
    x: float,
    y: float,
    z: float,
    tol: float = 1e-12,
    max_iter: int = 10,
) -> LLA:
    """Convert ECEF Cartesian coordinates to geodetic coordinates (LLA).

    Uses a fixed-point iteration on latitude, starting from the zero-height
    estimate. Height is evaluated with a form that stays well conditioned
    near the poles.

    Args:
        x: ECEF x-coordinate in meters.
        y: ECEF y-coordinate in meters.
        z: ECEF z-coordinate in meters.
        tol: Convergence tolerance on latitude (radians).
        max_iter: Maximum number of iterations.

    Returns:
        LLA point with latitude/longitude in degrees and altitude in meters.

    Example:
        >>> lla = ecef_to_lla(3980574.247, 0.0, 4966824.522)
        >>> print(f"LLA: lat={lla.lat:.4f}°, lon={lla.lon:.4f}°, h={lla.alt:.2f}m")
    """
    # Longitude (exact)
    lon = np.arctan2(y, x)

    # Distance from z-axis
    p = np.sqrt(x**2 + y**2)

    # Special case: on the polar axis
    if p < 1e-6:
        lat = np.copysign(np.pi / 2.0, z)
        return LLA(float(rad_to_deg(lat)), float(rad_to_deg(lon)), float(abs(z) - WGS84_B))

    # Initial latitude estimate (assumes height = 0)
    lat = np.arctan2(z, p * (1.0 - WGS84_E2))

    for _ in range(max_iter):
        sin_lat = np.sin(lat)
        N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)
        height = p * np.cos(lat) + z * sin_lat - WGS84_A**2 / N

        lat_new = np.arctan2(z, p * (1.0 - WGS84_E2 * N / (N + height)))

        if abs(lat_new - lat) < tol:
            lat = lat_new
            break

        lat = lat_new
    else:
        warnings.warn(
            f"ecef_to_lla did not converge within {max_iter} iterations "
            f"(tol={tol}); returning last estimate",
            RuntimeWarning,
        )

    sin_lat = np.sin(lat)
    N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat**2)
    height = p * np.cos(lat) + z * sin_lat - WGS84_A**2 / N

    return LLA(float(rad_to_deg(lat)), float(rad_to_deg(lon)), float(height))


def ecef_to_enu(ref_lla: Sequence[float], ecef_point: Sequence[float]) -> ENU:
    """Convert ECEF coordinates to local ENU coordinates.

    Transforms an ECEF point to East-North-Up coordinates relative to a
    reference point on the WGS84 ellipsoid. The reference is converted to
    ECEF, subtracted, and the difference is rotated into the tangent plane:

        E = -sin(lon)·dX + cos(lon)·dY
        N = -sin(lat)cos(lon)·dX - sin(lat)sin(lon)·dY + cos(lat)·dZ
        U =  cos(lat)cos(lon)·dX + cos(lat)sin(lon)·dY + sin(lat)·dZ

    Args:
        ref_lla: Reference (lat°, lon°, alt m), origin of the ENU frame.
        ecef_point: Point (x, y, z) in meters.

    Returns:
        ENU point (east, north, up) in meters.

    Example:
        >>> enu = ecef_to_enu((51.0, 0.0, 0.0), (3980574.247, 0.0, 4966824.522))
        >>> print(f"ENU: {enu}")
    """
    lat_ref, lon_ref, alt_ref = as_vector(ref_lla)
    xyz = as_vector(ecef_point)

    xyz_ref = np.array(lla_to_ecef(lat_ref, lon_ref, alt_ref), dtype=np.float64)

    enu = _enu_rotation(lat_ref, lon_ref) @ (xyz - xyz_ref)

    return ENU(float(enu[0]), float(enu[1]), float(enu[2]))


def enu_to_ecef(ref_lla: Sequence[float], enu_point: Sequence[float]) -> ECEF:
    """Convert local ENU coordinates back to ECEF coordinates.

    Applies the transpose of the ECEF-to-ENU rotation and adds the
    reference point's ECEF position.

    Args:
        ref_lla: Reference (lat°, lon°, alt m), origin of the ENU frame.
        enu_point: Point (east, north, up) in meters.

    Returns:
        ECEF point (x, y, z) in meters.
    """
    lat_ref, lon_ref, alt_ref = as_vector(ref_lla)
    enu = as_vector(enu_point)

    xyz_ref = np.array(lla_to_ecef(lat_ref, lon_ref, alt_ref), dtype=np.float64)
    xyz = xyz_ref + _enu_rotation(lat_ref, lon_ref).T @ enu

    return ECEF(float(xyz[0]), float(xyz[1]), float(xyz[2]))


def lla_to_enu(ref_lla: Sequence[float], lla_point: Sequence[float]) -> ENU:
    """Convert a geodetic point to ENU coordinates about a reference.

    Args:
        ref_lla: Reference (lat°, lon°, alt m), origin of the ENU frame.
        lla_point: Point (lat°, lon°, alt m).

    Returns:
        ENU point (east, north, up) in meters.
    """
    lat, lon, alt = as_vector(lla_point)
    return ecef_to_enu(ref_lla, lla_to_ecef(lat, lon, alt))
