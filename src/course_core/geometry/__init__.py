"""
Geometry utilities for maritime navigation
"""

from .geo_point import GeoPoint

from .geodesy import (
    EARTH_RADIUS,
    initial_bearing,
    rhumb_bearing,
    distance,
    rhumb_distance,
    cross_track_distance,
)

from .perpendicular import (
    local_vector,
    angle_between,
    passed_perpendicular,
)

__all__ = [
    'GeoPoint',
    # geodesy
    'EARTH_RADIUS',
    'initial_bearing',
    'rhumb_bearing',
    'distance',
    'rhumb_distance',
    'cross_track_distance',
    # perpendicular
    'local_vector',
    'angle_between',
    'passed_perpendicular',
]
