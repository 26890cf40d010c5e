"""위치 값 객체와 거리 계산 (Haversine).

피드, 검색, 발견 탭에서 공통으로 사용하는 지리 계산을 한 곳에 모은다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6_371_000.0
MILES_PER_METER = 0.000621371
FEET_PER_MILE = 5280


@dataclass(frozen=True)
class GeoPoint:
    """WGS84 위도/경도 (십진 도)."""

    latitude: float
    longitude: float


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """두 좌표 간 대권 거리(m). 범위 검증은 호출자 책임."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def distance_between(a: GeoPoint, b: GeoPoint) -> float:
    return distance_meters(a.latitude, a.longitude, b.latitude, b.longitude)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_distance(meters: float) -> str:
    """거리를 화면 표시용 문자열로 변환.

    0.1mi 미만은 m, 1mi 미만은 ft, 10mi 미만은 소수점 한 자리 mi,
    그 이상은 반올림한 mi.
    """
    miles = meters * MILES_PER_METER
    if miles < 0.1:
        return f"{_round_half_up(meters)}m"
    if miles < 1:
        return f"{miles * FEET_PER_MILE:.0f}ft"
    if miles < 10:
        return f"{miles:.1f}mi"
    return f"{_round_half_up(miles)}mi"
