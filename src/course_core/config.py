"""
Course provider 설정
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from .alarms import AlarmMethod
from .course import CalcMethod


@dataclass
class CourseConfig:
    """
    Course provider 설정 파라미터

    Attributes:
        calc_method: 결과로 사용할 계산 방식 (GreatCircle / Rhumbline)
        notification_sound: arrival circle 알림에 sound 포함 여부
        arrival_sample_size: arrival watcher debounce sample 수
    """
    calc_method: CalcMethod = CalcMethod.GREAT_CIRCLE
    notification_sound: bool = False
    arrival_sample_size: int = 1

    def __post_init__(self):
        self.calc_method = CalcMethod.parse(self.calc_method)
        if isinstance(self.arrival_sample_size, bool) or int(self.arrival_sample_size) < 1:
            raise ValueError(f"arrival_sample_size must be >= 1. Got {self.arrival_sample_size}")
        self.arrival_sample_size = int(self.arrival_sample_size)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "CourseConfig":
        """
        중첩 dict 옵션으로부터 설정 생성

        Example:
            {"notifications": {"sound": True},
             "calculations": {"method": "Rhumbline"}}
        """
        options = options or {}
        notifications = options.get('notifications') or {}
        calculations = options.get('calculations') or {}
        return cls(
            calc_method=calculations.get('method', CalcMethod.GREAT_CIRCLE),
            notification_sound=bool(notifications.get('sound', False)),
            arrival_sample_size=calculations.get('sampleSize', 1)
        )

    @property
    def alarm_methods(self) -> Tuple[AlarmMethod, ...]:
        if self.notification_sound:
            return (AlarmMethod.SOUND, AlarmMethod.VISUAL)
        return (AlarmMethod.VISUAL,)
