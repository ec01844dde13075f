#!/usr/bin/env python3
"""
구면 삼각법 계산 테스트
=======================

1. Great circle / rhumb line bearing, distance
2. Cross-track distance 부호 규칙
3. 각도 정규화 / 각도 차
4. Next point perpendicular 통과 판정
"""
import math

import numpy as np
import pytest

from course_core.geometry import (
    EARTH_RADIUS,
    GeoPoint,
    angle_between,
    cross_track_distance,
    distance,
    initial_bearing,
    passed_perpendicular,
    rhumb_bearing,
    rhumb_distance,
)
from course_core.utils import WrapTo180, angle_difference, normalize_angle

ONE_DEGREE = EARTH_RADIUS * math.pi / 180.0  # ≈ 111,195 m

PAIRS = [
    (GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)),
    (GeoPoint(37.5665, 126.9780), GeoPoint(35.1796, 129.0756)),
    (GeoPoint(-33.86, 151.21), GeoPoint(-41.29, 174.78)),
    (GeoPoint(10.0, 179.5), GeoPoint(11.0, -179.5)),
    (GeoPoint(60.0, -20.0), GeoPoint(60.0, 10.0)),
]


def test_distance_one_degree_of_longitude_on_equator():
    d = distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0))
    assert d == pytest.approx(111_195, rel=0.01)
    assert d == pytest.approx(ONE_DEGREE, rel=1e-9)


def test_distance_same_point_is_zero():
    p = GeoPoint(12.3, 45.6)
    assert distance(p, p) == 0.0
    assert rhumb_distance(p, p) == 0.0


@pytest.mark.parametrize("a, b", PAIRS)
def test_distance_symmetry(a, b):
    assert distance(a, b) == pytest.approx(distance(b, a), rel=1e-12)
    assert rhumb_distance(a, b) == pytest.approx(rhumb_distance(b, a), rel=1e-12)


def test_rhumb_distance_along_equator_and_meridian():
    assert rhumb_distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)) == pytest.approx(ONE_DEGREE, rel=1e-9)
    assert rhumb_distance(GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0)) == pytest.approx(ONE_DEGREE, rel=1e-9)


def test_rhumb_distance_longer_than_great_circle_at_high_latitude():
    a, b = GeoPoint(60.0, -20.0), GeoPoint(60.0, 10.0)
    assert rhumb_distance(a, b) > distance(a, b)


def test_antimeridian_crossing_takes_short_way():
    a, b = GeoPoint(0.0, 179.5), GeoPoint(0.0, -179.5)
    assert distance(a, b) == pytest.approx(ONE_DEGREE, rel=1e-6)
    assert rhumb_distance(a, b) == pytest.approx(ONE_DEGREE, rel=1e-6)
    assert rhumb_bearing(a, b) == pytest.approx(math.pi / 2, abs=1e-9)
    assert initial_bearing(a, b) == pytest.approx(math.pi / 2, abs=1e-6)


@pytest.mark.parametrize("end, expected", [
    (GeoPoint(1.0, 0.0), 0.0),
    (GeoPoint(0.0, 1.0), math.pi / 2),
    (GeoPoint(-1.0, 0.0), math.pi),
    (GeoPoint(0.0, -1.0), 3 * math.pi / 2),
])
def test_bearings_cardinal_directions(end, expected):
    start = GeoPoint(0.0, 0.0)
    assert initial_bearing(start, end) == pytest.approx(expected, abs=1e-9)
    assert rhumb_bearing(start, end) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize("a, b", PAIRS)
def test_bearings_within_range(a, b):
    for bearing in (initial_bearing(a, b), rhumb_bearing(a, b)):
        assert 0.0 <= bearing < 2 * math.pi


def test_cross_track_sign_convention():
    start, end = GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)   # 동쪽으로 항해

    left = cross_track_distance(GeoPoint(0.1, 0.5), start, end)     # 북쪽 = 좌현 쪽
    right = cross_track_distance(GeoPoint(-0.1, 0.5), start, end)   # 남쪽 = 우현 쪽

    assert left < 0
    assert right > 0
    assert abs(left) == pytest.approx(0.1 * ONE_DEGREE, rel=1e-3)
    assert left == pytest.approx(-right, rel=1e-9)


def test_cross_track_on_track_is_zero():
    start, end = GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)
    assert cross_track_distance(start, start, end) == 0.0
    assert cross_track_distance(GeoPoint(0.0, 0.4), start, end) == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("angle", [-10.0, -2 * math.pi, -math.pi, -0.5, 0.0, 1.0, math.pi, 2 * math.pi, 7.0, 100.0])
def test_normalize_angle_range_and_idempotence(angle):
    normalized = normalize_angle(angle)
    assert 0.0 <= normalized < 2 * math.pi
    assert normalize_angle(normalized) == normalized
    assert math.cos(normalized) == pytest.approx(math.cos(angle), abs=1e-9)
    assert math.sin(normalized) == pytest.approx(math.sin(angle), abs=1e-9)


def test_normalize_angle_keeps_bearings_just_west_of_north():
    just_west = 2 * math.pi - 5e-5
    assert normalize_angle(just_west) == pytest.approx(just_west, abs=1e-12)
    assert normalize_angle(-5e-5) == pytest.approx(just_west, abs=1e-12)
    # float 오차 수준은 0 으로
    assert normalize_angle(2 * math.pi - 1e-15) == 0.0


@pytest.mark.parametrize("angle", [0.0, 0.3, math.pi / 2, math.pi, 5.0, -2.0])
def test_angle_difference_with_itself_is_zero(angle):
    assert angle_difference(angle, angle) == 0.0


def test_angle_difference_sign_and_range():
    # 0 (North) 은 π/2 (East) 의 왼쪽 → 양수
    assert angle_difference(math.pi / 2, 0.0) == pytest.approx(math.pi / 2)
    assert angle_difference(0.0, math.pi / 2) == pytest.approx(-math.pi / 2)
    # 0 을 가로지르는 짧은 쪽 차이
    assert angle_difference(0.1, 2 * math.pi - 0.1) == pytest.approx(0.2)
    for a, b in [(0.0, math.pi), (math.pi, 0.0), (3 * math.pi, 0.0)]:
        diff = angle_difference(a, b)
        assert -math.pi < diff <= math.pi
        assert abs(diff) == pytest.approx(math.pi)


def test_wrap_to_180_continuous_across_antimeridian():
    assert WrapTo180(-359.8) == pytest.approx(0.2)
    assert WrapTo180(359.0) == pytest.approx(-1.0)


# ----------------------------------------------------------------------
# perpendicular

DESTINATION = GeoPoint(0.0, 1.0)
ORIGIN = GeoPoint(0.0, 0.0)


@pytest.mark.parametrize("vessel, expected", [
    (GeoPoint(0.0, 0.5), False),       # 접근 중, 같은 쪽
    (GeoPoint(0.01, 0.99), False),     # destination 직전, 약간 왼쪽
    (GeoPoint(0.0, 1.5), True),        # destination 을 지나침
    (GeoPoint(-0.02, 1.01), True),     # 지나친 뒤 약간 오른쪽
    (GeoPoint(1.0, 1.01), True),       # 수직선 바로 너머
])
def test_passed_perpendicular(vessel, expected):
    assert passed_perpendicular(vessel, DESTINATION, ORIGIN) is expected


def test_passed_perpendicular_degenerate_vectors():
    assert passed_perpendicular(DESTINATION, DESTINATION, ORIGIN) is False
    assert passed_perpendicular(GeoPoint(0.0, 1.5), DESTINATION, DESTINATION) is False


def test_passed_perpendicular_across_antimeridian():
    destination = GeoPoint(0.0, 179.9)
    origin = GeoPoint(0.0, 179.0)
    assert passed_perpendicular(GeoPoint(0.0, -179.9), destination, origin) is True
    assert passed_perpendicular(GeoPoint(0.0, 179.5), destination, origin) is False


def test_angle_between_zero_vector():
    assert angle_between(np.zeros(2), np.array([1.0, 0.0])) == 0.0
    assert angle_between(np.array([1.0, 0.0]), np.array([-1.0, 0.0])) == pytest.approx(math.pi)


def test_geo_point_validation_and_helpers():
    p = GeoPoint.from_lonlat([126.978, 37.5665])
    assert p == GeoPoint(37.5665, 126.978)
    assert GeoPoint.from_dict({'latitude': 1, 'longitude': 2}) == GeoPoint(1.0, 2.0)
    assert GeoPoint(0.0, 180.0).to_radians() == pytest.approx((0.0, math.pi))

    with pytest.raises(ValueError):
        GeoPoint(91.0, 0.0)
    with pytest.raises(ValueError):
        GeoPoint(0.0, -180.5)
    with pytest.raises(ValueError):
        GeoPoint(float('nan'), 0.0)
