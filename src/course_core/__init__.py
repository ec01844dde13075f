"""
Course Core - Navigation Course Calculation and Arrival Alarms

Great circle / rhumb line 기반 course 계산 (bearing, distance, cross-track error,
VMG/VMC, TTG/ETA, route, target speed) 과 arrival circle / perpendicular 통과 감시.
"""

from .geometry import GeoPoint
from .course import (
    CalcMethod,
    ActiveRoute,
    CourseInputs,
    CourseResult,
    CourseData,
    CourseCalculator,
)
from .alarms import RangeWatcher, WatchEvent, WatchEventType, Notification
from .config import CourseConfig
from .service import CourseWorker, CourseMonitor


__version__ = "0.1.0"
__author__ = "Maritime Robotics Lab"

__all__ = [
    # Main classes
    "CourseCalculator",
    "RangeWatcher",
    "CourseWorker",
    "CourseMonitor",
    "CourseConfig",

    # Types and enums
    "GeoPoint",
    "CalcMethod",
    "ActiveRoute",
    "CourseInputs",
    "CourseResult",
    "CourseData",
    "WatchEvent",
    "WatchEventType",
    "Notification",
]
