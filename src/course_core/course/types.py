"""
Course calculation 입력/출력 types 정의
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple

from ..geometry import GeoPoint


class CalcMethod(Enum):
    """
    Course 계산 방식
    """
    GREAT_CIRCLE = "GreatCircle"    # 대권 항법
    RHUMBLINE = "Rhumbline"         # 항정선 항법

    @classmethod
    def parse(cls, value) -> "CalcMethod":
        if isinstance(value, cls):
            return value
        for method in cls:
            if method.value.lower() == str(value).replace(' ', '').lower():
                return method
        raise ValueError(f"Unknown calculation method: {value!r}")


@dataclass(frozen=True)
class ActiveRoute:
    """
    활성 route

    Attributes:
        waypoints: 순서가 있는 waypoint 목록
        point_index: 현재 next point 의 index
        reverse: 역방향 항해 여부
    """
    waypoints: Tuple[GeoPoint, ...]
    point_index: int = 0
    reverse: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'waypoints', tuple(self.waypoints))

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Sequence[Sequence[float]],
        point_index: int = 0,
        reverse: bool = False
    ) -> "ActiveRoute":
        """GeoJSON LineString 좌표 ([lon, lat] 목록)로부터 생성"""
        return cls(
            waypoints=tuple(GeoPoint.from_lonlat(c) for c in coordinates),
            point_index=point_index,
            reverse=reverse
        )

    @property
    def has_legs(self) -> bool:
        return len(self.waypoints) >= 2


@dataclass(frozen=True)
class CourseInputs:
    """
    한 번의 course 계산에 사용되는 입력 snapshot

    position, next_point, previous_point 가 모두 있어야 계산 수행.
    나머지 값은 optional 이며 None 이면 관련 결과만 None 이 됨.

    Attributes:
        position: 선박 위치
        next_point: 목적지 (next point)
        previous_point: leg 시작점 (previous point)
        magnetic_variation: 자기 편차 (radians)
        heading_true: True heading (radians)
        course_over_ground_true: True COG (radians)
        speed_over_ground: SOG (m/s)
        wind_angle_true_ground: True wind angle (radians)
        timestamp: 기준 시각 (None 이면 현재 UTC)
        arrival_circle: arrival circle 반경 (meters)
        target_arrival_time: 목표 도착 시각
        active_route: 활성 route
    """
    position: Optional[GeoPoint] = None
    next_point: Optional[GeoPoint] = None
    previous_point: Optional[GeoPoint] = None
    magnetic_variation: Optional[float] = None
    heading_true: Optional[float] = None
    course_over_ground_true: Optional[float] = None
    speed_over_ground: Optional[float] = None
    wind_angle_true_ground: Optional[float] = None
    timestamp: Optional[datetime] = None
    arrival_circle: Optional[float] = None
    target_arrival_time: Optional[datetime] = None
    active_route: Optional[ActiveRoute] = None

    @property
    def has_destination(self) -> bool:
        return (
            self.position is not None
            and self.next_point is not None
            and self.previous_point is not None
        )

    @property
    def reference_time(self) -> datetime:
        """계산 기준 시각 (timezone-aware)"""
        return ensure_aware(self.timestamp) if self.timestamp is not None else datetime.now(timezone.utc)


class RouteResult(NamedTuple):
    """
    최종 목적지(route 끝)까지의 값
    """
    time_to_go: Optional[float]                   # seconds
    estimated_time_of_arrival: Optional[datetime]
    distance: Optional[float]                     # meters


@dataclass(frozen=True)
class CourseResult:
    """
    계산 방식 하나에 대한 course 결과

    모든 값은 None 가능 (None = 현재 입력으로 계산 불가, 0 이 아님).
    """
    calc_method: Optional[CalcMethod] = None
    bearing_track_true: Optional[float] = None        # radians
    bearing_track_magnetic: Optional[float] = None    # radians
    cross_track_error: Optional[float] = None         # meters
    distance: Optional[float] = None                  # meters
    previous_point_distance: Optional[float] = None   # meters
    bearing_true: Optional[float] = None              # radians
    bearing_magnetic: Optional[float] = None          # radians
    velocity_made_good: Optional[float] = None        # m/s (wind)
    velocity_made_good_to_course: Optional[float] = None  # m/s (course)
    time_to_go: Optional[float] = None                # seconds
    estimated_time_of_arrival: Optional[datetime] = None
    route: Optional[RouteResult] = None
    target_speed: Optional[float] = None              # m/s

    @property
    def is_empty(self) -> bool:
        return self == CourseResult()

    def to_dict(self) -> Dict[str, Any]:
        """camelCase dict (ETA 는 ISO-8601 문자열)"""
        if self.is_empty:
            return {}
        values = {
            'calcMethod': self.calc_method.value if self.calc_method else None,
            'bearingTrackTrue': self.bearing_track_true,
            'bearingTrackMagnetic': self.bearing_track_magnetic,
            'crossTrackError': self.cross_track_error,
            'distance': self.distance,
            'bearingTrue': self.bearing_true,
            'bearingMagnetic': self.bearing_magnetic,
            'velocityMadeGood': self.velocity_made_good,
            'velocityMadeGoodToCourse': self.velocity_made_good_to_course,
            'timeToGo': self.time_to_go,
            'estimatedTimeOfArrival': _isoformat(self.estimated_time_of_arrival),
            'previousPoint': {'distance': self.previous_point_distance},
            'targetSpeed': self.target_speed,
        }
        if self.route is not None:
            values['route'] = {
                'timeToGo': self.route.time_to_go,
                'estimatedTimeOfArrival': _isoformat(self.route.estimated_time_of_arrival),
                'distance': self.route.distance,
            }
        return values


@dataclass(frozen=True)
class CourseData:
    """
    한 계산 주기의 결과 (두 계산 방식 + perpendicular 통과 여부)
    """
    great_circle: CourseResult = field(default_factory=CourseResult)
    rhumbline: CourseResult = field(default_factory=CourseResult)
    passed_perpendicular: bool = False

    @classmethod
    def empty(cls) -> "CourseData":
        """활성 목적지 없음 sentinel"""
        return cls()

    @property
    def has_destination(self) -> bool:
        return not (self.great_circle.is_empty and self.rhumbline.is_empty)

    def for_method(self, method: CalcMethod) -> CourseResult:
        if CalcMethod.parse(method) is CalcMethod.RHUMBLINE:
            return self.rhumbline
        return self.great_circle

    def to_dict(self) -> Dict[str, Any]:
        return {
            'greatCircle': self.great_circle.to_dict(),
            'rhumbLine': self.rhumbline.to_dict(),
            'passedPerpendicular': self.passed_perpendicular,
        }


def ensure_aware(value: datetime) -> datetime:
    # naive datetime 은 UTC 로 간주
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None
