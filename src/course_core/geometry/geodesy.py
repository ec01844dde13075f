"""
구면 삼각법 기반 항법 계산 (Great Circle / Rhumb Line)

좌표계:
    - 위경도: degrees (GeoPoint)
    - 방위각: radians, [0, 2π), 0=North, clockwise
    - 거리: meters, 구면 지구 (R = 6,371,000 m)
"""
import numpy as np

from .geo_point import GeoPoint
from ..utils import normalize_angle

EARTH_RADIUS = 6_371_000.0  # meters (mean radius)


def _delta_longitude(lon1: float, lon2: float) -> float:
    """경도 차 (radians), antimeridian 을 넘으면 짧은 쪽으로 보정"""
    d_lambda = lon2 - lon1
    if abs(d_lambda) > np.pi:
        d_lambda = -(2 * np.pi - d_lambda) if d_lambda > 0 else (2 * np.pi + d_lambda)
    return d_lambda


def initial_bearing(start: GeoPoint, end: GeoPoint) -> float:
    """
    Great circle 초기 방위각 계산

    Args:
        start: 출발점
        end: 도착점

    Returns:
        초기 방위각 (radians, [0, 2π), 0=North, CW)
    """
    phi1, lambda1 = start.to_radians()
    phi2, lambda2 = end.to_radians()
    d_lambda = lambda2 - lambda1

    x = np.cos(phi1) * np.sin(phi2) - np.sin(phi1) * np.cos(phi2) * np.cos(d_lambda)
    y = np.sin(d_lambda) * np.cos(phi2)
    theta = np.arctan2(y, x)

    return normalize_angle(float(theta))


def rhumb_bearing(start: GeoPoint, end: GeoPoint) -> float:
    """
    Rhumb line (항정선) 방위각 계산

    Mercator 투영 위도차(Δψ)와 경도차(Δλ)로 일정 방위각을 구함.

    Returns:
        방위각 (radians, [0, 2π))
    """
    phi1, lambda1 = start.to_radians()
    phi2, lambda2 = end.to_radians()
    d_lambda = _delta_longitude(lambda1, lambda2)

    d_psi = _projected_latitude_difference(phi1, phi2)
    theta = np.arctan2(d_lambda, d_psi)

    return normalize_angle(float(theta))


def distance(start: GeoPoint, end: GeoPoint) -> float:
    """
    Haversine 공식을 이용한 great circle 거리

    Returns:
        거리 (meters)
    """
    phi1, lambda1 = start.to_radians()
    phi2, lambda2 = end.to_radians()
    d_phi = phi2 - phi1
    d_lambda = lambda2 - lambda1

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    delta = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return float(EARTH_RADIUS * delta)


def rhumb_distance(start: GeoPoint, end: GeoPoint) -> float:
    """
    Rhumb line 거리

    Notes:
        - 동서 방향(Δψ ≈ 0)에서는 q = cos(φ) 사용
        - 경도차는 antimeridian 을 넘으면 짧은 쪽으로 계산

    Returns:
        거리 (meters)
    """
    phi1, lambda1 = start.to_radians()
    phi2, lambda2 = end.to_radians()
    d_phi = phi2 - phi1
    d_lambda = _delta_longitude(lambda1, lambda2)

    d_psi = _projected_latitude_difference(phi1, phi2)
    q = d_phi / d_psi if abs(d_psi) > 10e-12 else np.cos(phi1)

    delta = np.sqrt(d_phi ** 2 + q ** 2 * d_lambda ** 2)

    return float(EARTH_RADIUS * delta)


def cross_track_distance(point: GeoPoint, path_start: GeoPoint, path_end: GeoPoint) -> float:
    """
    Great circle 경로(path_start → path_end)에 대한 cross-track 거리

    - Positive: 경로 오른쪽 (좌현 쪽으로 변침하여 보정)
    - Negative: 경로 왼쪽 (우현 쪽으로 변침하여 보정)

    Args:
        point: 선박 위치
        path_start: 경로 시작점 (previous point)
        path_end: 경로 끝점 (next point)

    Returns:
        부호 있는 거리 (meters)
    """
    delta13 = distance(path_start, point) / EARTH_RADIUS
    if delta13 == 0.0:
        return 0.0
    theta13 = initial_bearing(path_start, point)
    theta12 = initial_bearing(path_start, path_end)

    delta_xt = np.arcsin(np.clip(np.sin(delta13) * np.sin(theta13 - theta12), -1.0, 1.0))

    return float(EARTH_RADIUS * delta_xt)


def _projected_latitude_difference(phi1: float, phi2: float) -> float:
    # Mercator 위도차 Δψ
    return float(np.log(np.tan(np.pi / 4 + phi2 / 2)) - np.log(np.tan(np.pi / 4 + phi1 / 2)))
