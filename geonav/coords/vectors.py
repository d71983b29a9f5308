"""Vector geometry on Cartesian (ECEF/ENU) points.

Provides dot product, magnitude, angle and straight-line distance for
3-element points. ECEF and ENU are both Cartesian frames in meters, so the
same Euclidean distance applies to either.
"""

import warnings
from typing import Sequence

import numpy as np

from geonav.coords.frames import as_vector


def dot_product(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Dot product of two 3-vectors."""
    return float(np.dot(as_vector(v1), as_vector(v2)))


def vec_mag(v: Sequence[float]) -> float:
    """Magnitude (Euclidean norm) of a 3-vector."""
    v = as_vector(v)
    return float(np.sqrt(np.dot(v, v)))


def ecef_distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Straight-line distance between two ECEF points in meters."""
    diff = as_vector(p2) - as_vector(p1)
    return float(np.sqrt(np.sum(diff**2)))


def enu_distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Straight-line distance between two ENU points in meters.

    Both ENU points must share the same reference origin.
    """
    return ecef_distance(p1, p2)


def calc_angle(
    origin: Sequence[float],
    point_a: Sequence[float],
    point_b: Sequence[float],
) -> float:
    """Angle subtended at ``origin`` by two points.

    Builds the vectors OA and OB and returns acos(OA·OB / (|OA||OB|)). The
    cosine is clipped to [-1, 1] so that rounding on (anti)parallel vectors
    cannot push ``acos`` out of its domain.

    Args:
        origin: Common origin (x, y, z), normally in ECEF meters.
        point_a: First point (x, y, z).
        point_b: Second point (x, y, z).

    Returns:
        Angle between OA and OB in radians, in [0, π]. NaN if the origin
        coincides with either point.

    Example:
        >>> calc_angle((0, 0, 0), (1, 0, 0), (0, 1, 0))  # π/2
        1.5707963267948966
    """
    o = as_vector(origin)
    oa = as_vector(point_a) - o
    ob = as_vector(point_b) - o

    if not (np.any(oa) and np.any(ob)):
        warnings.warn(
            "calc_angle: origin coincides with a point, angle is undefined",
            RuntimeWarning,
        )
        return float("nan")

    # scale to unit max component so tiny vectors do not underflow in the norm
    oa = oa / np.max(np.abs(oa))
    ob = ob / np.max(np.abs(ob))

    cos_angle = np.clip(dot_product(oa, ob) / (vec_mag(oa) * vec_mag(ob)), -1.0, 1.0)
    return float(np.arccos(cos_angle))
