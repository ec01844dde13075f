"""
Watch event / notification types 정의
"""
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple


class WatchEventType(Enum):
    """
    RangeWatcher 이벤트 종류
    """
    ENTER = "enter"     # 범위 밖 → 범위 안
    IN = "in"           # 범위 안에서 값 변경
    EXIT = "exit"       # 범위 안 → 범위 밖


class WatchEvent(NamedTuple):
    """
    RangeWatcher 이벤트

    from_below: (enter) 이전 값이 range_min 보다 작았는지
    is_below: (exit) 현재 값이 range_min 보다 작은지
    """
    type: WatchEventType
    value: float
    from_below: Optional[bool] = None
    is_below: Optional[bool] = None


class AlarmState(Enum):
    """
    Notification 상태 등급
    """
    NOMINAL = "nominal"
    NORMAL = "normal"
    ALERT = "alert"
    WARN = "warn"
    ALARM = "alarm"
    EMERGENCY = "emergency"


class AlarmMethod(Enum):
    """
    Notification 표시 방법
    """
    VISUAL = "visual"
    SOUND = "sound"


class Notification:
    """
    Notification 메시지

    message 가 None 이면 해당 path 의 notification 해제 (clear).
    """

    PREFIX = "notifications."

    def __init__(
        self,
        path: str,
        message: Optional[str],
        state: AlarmState = AlarmState.ALERT,
        method: Sequence[AlarmMethod] = (AlarmMethod.SOUND, AlarmMethod.VISUAL)
    ):
        self.path = path if path.startswith(self.PREFIX) else f"{self.PREFIX}{path}"
        self.message = message
        self.state = state
        self.method: Tuple[AlarmMethod, ...] = tuple(method)

    @property
    def is_clear(self) -> bool:
        return self.message is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'value': None if self.is_clear else {
                'state': self.state.value,
                'method': [m.value for m in self.method],
                'message': self.message,
            },
        }

    def __eq__(self, other):
        if not isinstance(other, Notification):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Notification(path={self.path!r}, message={self.message!r}, state={self.state.name})"
