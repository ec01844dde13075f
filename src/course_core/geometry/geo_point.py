"""
위경도 좌표 (WGS84 구면 근사)
"""
import math
from dataclasses import dataclass
from typing import Mapping, Sequence, Tuple


@dataclass(frozen=True)
class GeoPoint:
    """
    지리 좌표 점 (immutable)

    Attributes:
        latitude: 위도 (degrees, -90 ~ +90)
        longitude: 경도 (degrees, -180 ~ +180)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        lat = float(self.latitude)
        lon = float(self.longitude)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f"GeoPoint coordinates must be finite. Got ({lat}, {lon})")
        if abs(lat) > 90.0:
            raise ValueError(f"latitude must be within [-90, 90]. Got {lat}")
        if abs(lon) > 180.0:
            raise ValueError(f"longitude must be within [-180, 180]. Got {lon}")
        object.__setattr__(self, 'latitude', lat)
        object.__setattr__(self, 'longitude', lon)

    @classmethod
    def from_lonlat(cls, coords: Sequence[float]) -> "GeoPoint":
        """GeoJSON 순서 [lon, lat] 좌표 변환"""
        if len(coords) < 2:
            raise ValueError(f"coordinates must be [lon, lat]. Got {coords}")
        return cls(latitude=coords[1], longitude=coords[0])

    @classmethod
    def from_dict(cls, value: Mapping[str, float]) -> "GeoPoint":
        """{"latitude": .., "longitude": ..} 형식 변환"""
        return cls(latitude=value['latitude'], longitude=value['longitude'])

    def to_radians(self) -> Tuple[float, float]:
        """(phi, lambda) in radians"""
        return math.radians(self.latitude), math.radians(self.longitude)
