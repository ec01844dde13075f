from .utils import (
    wrap_angle,
    angle_difference,
    WrapTo180,
    normalize_angle,
    is_number,
)

__all__ = [
    'wrap_angle',
    'angle_difference',
    'WrapTo180',
    'normalize_angle',
    'is_number',
]
