"""
Angle and unit utilities.

Provides the leaf-level helpers every other module builds on:
- Degree/radian conversion
- Signed longitude normalization
- Truncating floating-point modulo
- Decimal degrees <-> degrees-minutes-seconds (DMS)

All functions are pure and perform no bounds checking.
"""

import math
from typing import NamedTuple, Sequence, Union

import numpy as np


class DMS(NamedTuple):
    """Degrees-minutes-seconds angle.

    The sign of the angle is carried by ``degrees`` only; ``minutes`` and
    ``seconds`` are always non-negative.
    """

    degrees: int
    minutes: int
    seconds: float


def deg_to_rad(deg: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Convert degrees to radians."""
    return deg * np.pi / 180.0


def rad_to_deg(rad: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Convert radians to degrees."""
    return rad * 180.0 / np.pi


def signed_lon(lon: float) -> float:
    """
    Convert a longitude in [0, 360) to signed [-180, 180] form.

    Values above 180° are shifted down by a full turn. Everything else is
    returned unchanged, including negative inputs.

    Args:
        lon: Longitude in degrees, expected in [0, 360)

    Returns:
        Longitude in degrees in [-180, 180]

    Example:
        >>> signed_lon(270.0)
        -90.0
        >>> signed_lon(180.0)
        180.0
    """
    if lon > 180.0:
        return lon - 360.0
    return lon


def fmod(x: float, y: float) -> float:
    """
    Floating-point remainder with truncating division.

    Computes ``x - trunc(x / y) * y``, so the result has the sign of ``x``.
    This differs from Python's ``%`` operator, which floors:

        >>> fmod(-1.0, 360.0)
        -1.0
        >>> -1.0 % 360.0
        359.0

    Longitude normalization in the navigation module relies on these
    truncating semantics.

    Args:
        x: Dividend
        y: Divisor (non-zero)

    Returns:
        Remainder of x / y with the sign of x

    Raises:
        ZeroDivisionError: If y is zero.
    """
    x = float(x)
    y = float(y)
    return x - math.trunc(x / y) * y


def dec_to_dms(decimal: float) -> DMS:
    """
    Convert decimal degrees to degrees, minutes and seconds.

    Degrees are truncated toward zero and keep the sign; minutes and seconds
    are taken from the magnitude of the fractional part.

    Note:
        A negative value whose integer part is zero (e.g. -0.5°) cannot carry
        its sign in the degrees field and converts to ``DMS(0, 30, 0.0)``.

    Args:
        decimal: Angle in decimal degrees

    Returns:
        DMS tuple (degrees, minutes, seconds)

    Example:
        >>> dec_to_dms(-2.5)
        DMS(degrees=-2, minutes=30, seconds=0.0)
    """
    degrees = math.trunc(decimal)
    frac = abs(decimal - degrees)
    minutes = math.trunc(60.0 * frac)
    seconds = 3600.0 * (frac - minutes / 60.0)
    return DMS(degrees, minutes, seconds)


def dms_to_dec(
    degrees: Union[float, Sequence[float]],
    minutes: float = 0.0,
    seconds: float = 0.0,
) -> float:
    """
    Convert degrees, minutes and seconds to decimal degrees.

    Accepts either three separate components or a single DMS tuple. The
    result is negative only when ``degrees`` is negative.

    Args:
        degrees: Signed whole degrees, or a (degrees, minutes, seconds) sequence
        minutes: Minutes of arc (non-negative)
        seconds: Seconds of arc (non-negative)

    Returns:
        Angle in decimal degrees

    Example:
        >>> dms_to_dec(-2, 30, 0.0)
        -2.5
        >>> dms_to_dec(DMS(10, 45, 36.0))
        10.76
    """
    if np.ndim(degrees) == 1:
        if len(degrees) != 3:
            raise ValueError(f"Expected (degrees, minutes, seconds), got {len(degrees)} values")
        degrees, minutes, seconds = degrees

    magnitude = abs(degrees) + minutes / 60.0 + seconds / 3600.0
    if degrees >= 0:
        return magnitude
    return -magnitude
