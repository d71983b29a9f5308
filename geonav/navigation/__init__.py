"""Great-circle navigation on a spherical earth.

Distance, bearing, midpoint and destination calculations using the
haversine family of formulas and a mean earth radius of 6371 km.
"""

from geonav.navigation.haversine import (
    EARTH_MEAN_RADIUS,
    destination,
    distance,
    final_bearing,
    haversine_distance,
    initial_bearing,
    midpoint,
)

__all__ = [
    "EARTH_MEAN_RADIUS",
    "haversine_distance",
    "distance",
    "initial_bearing",
    "final_bearing",
    "midpoint",
    "destination",
]
