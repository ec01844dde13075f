"""
Alarms Module

- RangeWatcher: debounce 가 적용된 범위 진입/이탈 감시
- Notification: arrival circle / perpendicular 통과 알림
"""

from .types import (
    WatchEventType,
    WatchEvent,
    AlarmState,
    AlarmMethod,
    Notification,
)

from .watcher import RangeWatcher

from .notifications import (
    ARRIVAL_CIRCLE_PATH,
    PERPENDICULAR_PATH,
    arrival_circle_notification,
    perpendicular_notification,
    clear_notification,
)

__all__ = [
    # types
    'WatchEventType',
    'WatchEvent',
    'AlarmState',
    'AlarmMethod',
    'Notification',
    # watcher
    'RangeWatcher',
    # notifications
    'ARRIVAL_CIRCLE_PATH',
    'PERPENDICULAR_PATH',
    'arrival_circle_notification',
    'perpendicular_notification',
    'clear_notification',
]
