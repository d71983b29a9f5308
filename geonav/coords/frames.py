"""Point types for the supported coordinate frames.

This module defines the immutable value types used to pass points between
the coordinate frames handled by the package:
- LLA (Latitude-Longitude-Altitude): Geodetic coordinates on WGS84
- ECEF (Earth-Centered Earth-Fixed): Global Cartesian frame
- ENU (East-North-Up): Local tangent plane at a reference point
- LatLon: Latitude/longitude pair on a spherical earth

Angles are in decimal degrees and lengths in meters throughout.
"""

from typing import NamedTuple, Sequence, Union

import numpy as np
from numpy.typing import NDArray


class LLA(NamedTuple):
    """Geodetic coordinate.

    Attributes:
        lat: Latitude in degrees (positive north).
        lon: Longitude in degrees (positive east).
        alt: Height above the WGS84 ellipsoid in meters (not the geoid).
    """

    lat: float
    lon: float
    alt: float = 0.0


class ECEF(NamedTuple):
    """Earth-Centered Earth-Fixed Cartesian point in meters."""

    x: float
    y: float
    z: float


class ENU(NamedTuple):
    """East-North-Up point in meters, relative to a reference LLA."""

    east: float
    north: float
    up: float


class LatLon(NamedTuple):
    """Latitude/longitude pair in degrees on a spherical earth."""

    lat: float
    lon: float


def as_vector(
    values: Union[Sequence[float], NDArray[np.float64]],
    size: int = 3,
) -> NDArray[np.float64]:
    """Convert a point or vector to a flat float64 array of the given length.

    Args:
        values: Any sequence of numbers (tuple, list, array, NamedTuple).
        size: Required number of elements.

    Returns:
        1-D numpy array of shape (size,).

    Raises:
        ValueError: If the input does not hold exactly ``size`` elements.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape != (size,):
        raise ValueError(f"Expected {size}-element vector, got shape {arr.shape}")
    return arr
