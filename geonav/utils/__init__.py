"""
Utility functions shared across the package.

This module provides the angle and unit helpers used by the coordinate
transforms and the great-circle navigation routines.
"""

from .angles import (
    DMS,
    deg_to_rad,
    rad_to_deg,
    signed_lon,
    fmod,
    dec_to_dms,
    dms_to_dec,
)

__all__ = [
    'DMS',
    'deg_to_rad',
    'rad_to_deg',
    'signed_lon',
    'fmod',
    'dec_to_dms',
    'dms_to_dec',
]
