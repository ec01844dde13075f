#!/usr/bin/env python3
"""
Route 남은 거리 합산 테스트

적도 위 1° 간격 waypoint 4개 (leg 3개) 사용
"""
import math

import pytest

from course_core.course import (
    ActiveRoute,
    CalcMethod,
    resolve_active_route,
    route_remaining,
    route_remaining_for,
)
from course_core.geometry import EARTH_RADIUS, GeoPoint

LEG = EARTH_RADIUS * math.pi / 180.0
WAYPOINTS = [GeoPoint(0.0, float(lon)) for lon in range(4)]
LAST = len(WAYPOINTS) - 1


@pytest.mark.parametrize("method", list(CalcMethod))
def test_remaining_is_zero_at_last_index(method):
    assert route_remaining(WAYPOINTS, LAST, False, method) == 0.0


@pytest.mark.parametrize("waypoints", [[], [GeoPoint(0.0, 0.0)]])
def test_remaining_is_zero_with_less_than_two_waypoints(waypoints):
    assert route_remaining(waypoints, 0, False) == 0.0
    assert route_remaining(waypoints, 0, True) == 0.0


@pytest.mark.parametrize("index, legs", [(0, 3), (1, 2), (2, 1), (3, 0)])
def test_remaining_forward(index, legs):
    assert route_remaining(WAYPOINTS, index) == pytest.approx(legs * LEG, rel=1e-9)


@pytest.mark.parametrize("index, legs", [(0, 0), (1, 2), (2, 1), (3, 0)])
def test_remaining_reverse(index, legs):
    # 역방향: waypoints[0] 부터 mirrored index (last - index) 까지 합산
    assert route_remaining(WAYPOINTS, index, reverse=True) == pytest.approx(legs * LEG, rel=1e-9)


def test_remaining_rhumbline_uses_rhumb_distance():
    waypoints = [GeoPoint(60.0, 0.0), GeoPoint(60.0, 10.0), GeoPoint(60.0, 20.0)]
    gc = route_remaining(waypoints, 0, False, CalcMethod.GREAT_CIRCLE)
    rl = route_remaining(waypoints, 0, False, CalcMethod.RHUMBLINE)
    assert rl > gc


def test_remaining_index_out_of_range():
    assert route_remaining(WAYPOINTS, 10) == 0.0
    assert route_remaining(WAYPOINTS, -1) == 0.0


def test_remaining_for_active_route():
    route = ActiveRoute(WAYPOINTS, point_index=1)
    assert route_remaining_for(route) == pytest.approx(2 * LEG, rel=1e-9)
    assert route_remaining_for(route, CalcMethod.RHUMBLINE) == pytest.approx(2 * LEG, rel=1e-9)


class FakeResolver:
    def __init__(self, routes):
        self.routes = routes
        self.requested = []

    def resolve(self, route_id):
        self.requested.append(route_id)
        return self.routes.get(route_id, [])


def test_resolve_active_route_from_href():
    resolver = FakeResolver({'abc123': [[0.0, 0.0], [1.0, 0.0], [2.0, 0.5]]})

    route = resolve_active_route(resolver, '/resources/routes/abc123', point_index=1, reverse=True)

    assert resolver.requested == ['abc123']
    assert route.waypoints == (GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0), GeoPoint(0.5, 2.0))
    assert route.point_index == 1
    assert route.reverse is True
    assert route.has_legs


def test_resolve_unknown_route_is_empty():
    route = resolve_active_route(FakeResolver({}), '/resources/routes/missing')
    assert route.waypoints == ()
    assert not route.has_legs
