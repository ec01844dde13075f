"""
각도 정규화 / 입력 값 검사 helpers
"""
import math

import numpy as np

TWO_PI = 2 * math.pi


def wrap_angle(angle, half_turn=math.pi):
    """
    각도를 (-half_turn, half_turn] 범위로 wrap

    Args:
        angle: 각도 (radians, half_turn=180 이면 degrees)
        half_turn: 반 바퀴에 해당하는 값 (π 또는 180)

    Returns:
        float: wrap 된 각도. -half_turn 은 +half_turn 으로 반환
    """
    rad = angle * math.pi / half_turn
    wrapped = float(np.arctan2(np.sin(rad), np.cos(rad)))
    if wrapped <= -math.pi:
        wrapped = math.pi
    return wrapped * half_turn / math.pi


def angle_difference(angle1, angle2):
    """
    두 방위 사이의 최단 각도 차 angle1 - angle2, (-π, π] radians

    항해 각도 (0 = North, 시계 방향) 기준으로 양수면 angle2 가 angle1 의 왼쪽,
    음수면 오른쪽.
    """
    return wrap_angle(angle1 - angle2)


def WrapTo180(deg):
    """degrees → (-180, 180]"""
    return wrap_angle(deg, half_turn=180.0)


def normalize_angle(rad):
    """
    방위 정규화: radians → [0, 2π)

    float 오차로 2π 에 붙는 값은 0 으로 처리.
    """
    wrapped = float(np.mod(rad, TWO_PI))
    if wrapped >= TWO_PI or math.isclose(wrapped, TWO_PI, rel_tol=0.0, abs_tol=1e-12):
        return 0.0
    return wrapped


def is_number(value):
    """유한한 실수인지 검사 (bool 제외). None/NaN/inf 는 False."""
    return (
        isinstance(value, (int, float, np.integer, np.floating))
        and not isinstance(value, bool)
        and bool(np.isfinite(value))
    )
