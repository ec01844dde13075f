"""
Course calculation engine

입력 snapshot 하나로부터 Great Circle / Rhumbline 두 방식의 결과를 동시에 계산
"""
import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple

import numpy as np

from .types import (
    ActiveRoute,
    CalcMethod,
    CourseData,
    CourseInputs,
    CourseResult,
    RouteResult,
    ensure_aware,
)
from .route import route_remaining_for
from ..geometry import (
    cross_track_distance,
    distance,
    initial_bearing,
    passed_perpendicular,
    rhumb_bearing,
    rhumb_distance,
)
from ..utils import angle_difference, is_number, normalize_angle

logger = logging.getLogger(__name__)


class CourseCalculator:
    """
    Course 계산기 (stateless)

    Cross-track error 와 perpendicular 통과 여부는 한 번만 계산하여 두 방식이 공유.
    Cross-track error 는 Rhumbline 결과에서도 great circle 경로 기준 값.
    """

    METHODS = (CalcMethod.GREAT_CIRCLE, CalcMethod.RHUMBLINE)

    _BEARING = {
        CalcMethod.GREAT_CIRCLE: initial_bearing,
        CalcMethod.RHUMBLINE: rhumb_bearing,
    }
    _DISTANCE = {
        CalcMethod.GREAT_CIRCLE: distance,
        CalcMethod.RHUMBLINE: rhumb_distance,
    }

    def compute(self, inputs: CourseInputs) -> CourseData:
        """
        Course 계산

        Args:
            inputs: 입력 snapshot

        Returns:
            CourseData
            - position / next_point / previous_point 중 하나라도 없으면 CourseData.empty()
        """
        if not inputs.has_destination:
            logger.debug("No active destination, returning empty course data")
            return CourseData.empty()

        reference_time = inputs.reference_time

        xte = cross_track_distance(inputs.position, inputs.previous_point, inputs.next_point)
        passed = passed_perpendicular(inputs.position, inputs.next_point, inputs.previous_point)

        results = {
            method: self._compute_method(inputs, method, xte, reference_time)
            for method in self.METHODS
        }

        return CourseData(
            great_circle=results[CalcMethod.GREAT_CIRCLE],
            rhumbline=results[CalcMethod.RHUMBLINE],
            passed_perpendicular=passed
        )

    def _compute_method(
        self,
        inputs: CourseInputs,
        method: CalcMethod,
        xte: float,
        reference_time: datetime
    ) -> CourseResult:
        bearing_fn = self._BEARING[method]
        distance_fn = self._DISTANCE[method]

        variation = inputs.magnetic_variation if is_number(inputs.magnetic_variation) else 0.0

        bearing_track_true = bearing_fn(inputs.previous_point, inputs.next_point)
        bearing_true = bearing_fn(inputs.position, inputs.next_point)

        dist = distance_fn(inputs.position, inputs.next_point)
        previous_distance = distance_fn(inputs.position, inputs.previous_point)

        vmg = velocity_made_good(inputs.wind_angle_true_ground, inputs.speed_over_ground)
        vmc = velocity_made_good_to_course(
            bearing_true, inputs.course_over_ground_true, inputs.speed_over_ground
        )

        ttg, eta = time_to_go(dist, vmc, reference_time)

        route = _active_route(inputs.active_route)
        remaining = route_remaining_for(route, method) if route is not None else 0.0
        route_result = None
        if route is not None:
            route_distance = dist + remaining
            route_ttg, route_eta = time_to_go(route_distance, vmc, reference_time)
            route_result = RouteResult(
                time_to_go=route_ttg,
                estimated_time_of_arrival=route_eta,
                distance=route_distance
            )

        return CourseResult(
            calc_method=method,
            bearing_track_true=bearing_track_true,
            bearing_track_magnetic=normalize_angle(bearing_track_true + variation),
            cross_track_error=xte,
            distance=dist,
            previous_point_distance=previous_distance,
            bearing_true=bearing_true,
            bearing_magnetic=normalize_angle(bearing_true + variation),
            velocity_made_good=vmg,
            velocity_made_good_to_course=vmc,
            time_to_go=ttg,
            estimated_time_of_arrival=eta,
            route=route_result,
            target_speed=target_speed(
                dist + remaining, inputs.target_arrival_time, reference_time
            )
        )


def velocity_made_good(wind_angle: Optional[float], speed: Optional[float]) -> Optional[float]:
    """
    VMG (wind 기준): cos(true wind angle) * SOG
    """
    if not is_number(wind_angle) or not is_number(speed):
        return None
    return float(np.cos(wind_angle) * speed)


def velocity_made_good_to_course(
    bearing: float,
    course_over_ground: Optional[float],
    speed: Optional[float]
) -> Optional[float]:
    """
    VMC (next point 방향 속도 성분): cos(|bearing - COG|) * SOG

    Args:
        bearing: next point 방향 true bearing (radians)
        course_over_ground: True COG (radians)
        speed: SOG (m/s)
    """
    if not is_number(course_over_ground) or not is_number(speed):
        return None
    return float(np.cos(abs(angle_difference(bearing, course_over_ground))) * speed)


def time_to_go(
    dist: Optional[float],
    vmc: Optional[float],
    reference_time: datetime
) -> Tuple[Optional[float], Optional[datetime]]:
    """
    TTG (seconds) 와 ETA

    거리 또는 VMC 가 없거나 0 이면 (None, None)
    """
    if not is_number(dist) or not dist or not is_number(vmc) or not vmc:
        return None, None
    ttg = dist / vmc
    try:
        eta = reference_time + timedelta(seconds=ttg)
    except OverflowError:
        # VMC 가 0 에 가까우면 datetime 범위를 벗어남
        eta = None
    return ttg, eta


def target_speed(
    dist: Optional[float],
    target_arrival_time: Optional[datetime],
    reference_time: datetime
) -> Optional[float]:
    """
    목표 도착 시각을 맞추기 위한 평균 속도 (m/s)

    목표 시각이 없거나 이미 지났으면 None
    """
    if target_arrival_time is None or not is_number(dist):
        return None
    seconds = (ensure_aware(target_arrival_time) - reference_time).total_seconds()
    if seconds <= 0:
        return None
    return dist / seconds


def _active_route(route: Optional[ActiveRoute]) -> Optional[ActiveRoute]:
    return route if route is not None and route.has_legs else None
