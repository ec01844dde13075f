"""
Course calculation (bearing, distance, XTE, VMG/VMC, TTG/ETA, route, target speed)
"""

from .types import (
    CalcMethod,
    ActiveRoute,
    CourseInputs,
    RouteResult,
    CourseResult,
    CourseData,
)

from .route import (
    RouteResolver,
    route_remaining,
    route_remaining_for,
    resolve_active_route,
)

from .calculator import (
    CourseCalculator,
    velocity_made_good,
    velocity_made_good_to_course,
    time_to_go,
    target_speed,
)

__all__ = [
    # types
    'CalcMethod',
    'ActiveRoute',
    'CourseInputs',
    'RouteResult',
    'CourseResult',
    'CourseData',
    # route
    'RouteResolver',
    'route_remaining',
    'route_remaining_for',
    'resolve_active_route',
    # calculator
    'CourseCalculator',
    'velocity_made_good',
    'velocity_made_good_to_course',
    'time_to_go',
    'target_speed',
]
