"""
Active route 의 남은 leg 거리 합산
"""
import logging
from typing import Protocol, Sequence

from .types import ActiveRoute, CalcMethod
from ..geometry import GeoPoint, distance, rhumb_distance

logger = logging.getLogger(__name__)


class RouteResolver(Protocol):
    """route id 를 GeoJSON 좌표 ([lon, lat] 목록)로 확장하는 host 측 collaborator"""

    def resolve(self, route_id: str) -> Sequence[Sequence[float]]:
        ...


def leg_distance_function(method: CalcMethod):
    """계산 방식별 거리 함수"""
    if CalcMethod.parse(method) is CalcMethod.RHUMBLINE:
        return rhumb_distance
    return distance


def route_remaining(
    waypoints: Sequence[GeoPoint],
    current_index: int,
    reverse: bool = False,
    method: CalcMethod = CalcMethod.GREAT_CIRCLE
) -> float:
    """
    현재 index 이후 남은 leg 길이의 합

    선박 → next point 직선 거리는 포함하지 않음 (호출 측에서 더함).

    Args:
        waypoints: route waypoint 목록
        current_index: next point 의 index
        reverse: 역방향 항해 여부
        method: 계산 방식 (leg 거리 함수 선택)

    Returns:
        남은 거리 (meters)
        - waypoint 2개 미만이면 0
        - 정방향에서 마지막 index, 역방향에서 첫 index 이면 0

    Notes:
        - 정방향: waypoints[current_index] → ... → waypoints[-1]
        - 역방향: waypoints[0] → ... → waypoints[last - current_index]
    """
    if len(waypoints) < 2:
        return 0.0

    last_index = len(waypoints) - 1
    if current_index < 0 or current_index > last_index:
        logger.warning("Route point index %s outside [0, %s]", current_index, last_index)
        return 0.0

    if reverse:
        if current_index == 0:
            return 0.0
        start, end = 0, last_index - current_index
    else:
        if current_index == last_index:
            return 0.0
        start, end = current_index, last_index

    leg_distance = leg_distance_function(method)
    total = 0.0
    for idx in range(start, end):
        total += leg_distance(waypoints[idx], waypoints[idx + 1])

    return total


def route_remaining_for(route: ActiveRoute, method: CalcMethod = CalcMethod.GREAT_CIRCLE) -> float:
    return route_remaining(route.waypoints, route.point_index, route.reverse, method)


def resolve_active_route(
    resolver: RouteResolver,
    href: str,
    point_index: int = 0,
    reverse: bool = False
) -> ActiveRoute:
    """
    route reference (href) 를 ActiveRoute 로 확장

    href 의 마지막 path segment 를 route id 로 사용
    (e.g. "/resources/routes/abc123" → "abc123").
    """
    route_id = href.rstrip('/').split('/')[-1]
    coordinates = resolver.resolve(route_id) or []
    logger.debug("Resolved route %s: %d waypoints", route_id, len(coordinates))
    return ActiveRoute.from_coordinates(coordinates, point_index=point_index, reverse=reverse)
