"""
Watch event → Notification 변환
"""
from typing import Optional, Sequence

from .types import AlarmMethod, AlarmState, Notification, WatchEvent, WatchEventType

ARRIVAL_CIRCLE_PATH = "navigation.course.arrivalCircleEntered"
PERPENDICULAR_PATH = "navigation.course.perpendicularPassed"


def arrival_circle_notification(
    event: WatchEvent,
    radius: float,
    methods: Sequence[AlarmMethod] = (AlarmMethod.VISUAL,)
) -> Optional[Notification]:
    """
    Arrival circle 이벤트 notification

    Args:
        event: arrival watcher 이벤트 (value = next point 까지 거리)
        radius: arrival circle 반경 (meters)
        methods: 알림 방법

    Returns:
        ENTER → alert, EXIT → clear, IN → None
    """
    if event.type is WatchEventType.ENTER:
        return Notification(
            ARRIVAL_CIRCLE_PATH,
            f"Entered arrival zone: {event.value:.0f}m < {radius:.0f}",
            AlarmState.ALERT,
            methods
        )
    if event.type is WatchEventType.EXIT:
        return clear_notification(ARRIVAL_CIRCLE_PATH)
    return None


def perpendicular_notification(event: WatchEvent) -> Optional[Notification]:
    """
    Next point perpendicular 통과 이벤트 notification (표시 방법 없음)
    """
    if event.type is WatchEventType.ENTER:
        return Notification(
            PERPENDICULAR_PATH,
            "Next Point perpendicular has been passed.",
            AlarmState.ALERT,
            ()
        )
    if event.type is WatchEventType.EXIT:
        return clear_notification(PERPENDICULAR_PATH)
    return None


def clear_notification(path: str) -> Notification:
    return Notification(path, None)
