"""
Next point perpendicular 통과 판정

destination 을 원점으로 하는 국소 평면(East, North) 벡터 두 개:
    a = destination → vessel
    b = destination → previous point
두 벡터 사이 각도가 90° 를 넘으면 선박이 destination 의 수직선을 통과한 것으로 판단.
"""
import numpy as np

from .geo_point import GeoPoint
from ..utils import WrapTo180


def local_vector(origin: GeoPoint, target: GeoPoint) -> np.ndarray:
    """
    origin 기준 target 의 국소 평면 벡터 [east, north] (degrees 단위)

    경도차는 ±180° antimeridian 을 연속으로 처리하고 origin 위도의 cos 으로 축척.
    """
    d_lon = WrapTo180(target.longitude - origin.longitude)
    d_lat = target.latitude - origin.latitude
    east = d_lon * np.cos(np.radians(origin.latitude))
    return np.array([east, d_lat], dtype=float)


def angle_between(vec_a: np.ndarray, vec_b: np.ndarray) -> float:
    """
    두 벡터 사이 각도 (radians, [0, π])

    길이가 0 인 벡터가 있으면 0 반환 (NaN 방지)
    """
    norm_a = np.linalg.norm(vec_a)
    norm_b = np.linalg.norm(vec_b)
    if norm_a < 1e-12 or norm_b < 1e-12:
        return 0.0
    cos_angle = np.dot(vec_a, vec_b) / (norm_a * norm_b)
    return float(np.arccos(np.clip(cos_angle, -1.0, 1.0)))


def passed_perpendicular(vessel: GeoPoint, destination: GeoPoint, previous_point: GeoPoint) -> bool:
    """
    선박이 destination perpendicular line 을 통과했는지 판정

    Args:
        vessel: 선박 위치
        destination: next point
        previous_point: leg 시작점

    Returns:
        True if the angle between (dest→vessel) and (dest→previous point) > 90°
    """
    to_vessel = local_vector(destination, vessel)
    to_origin = local_vector(destination, previous_point)
    return angle_between(to_vessel, to_origin) > np.pi / 2
