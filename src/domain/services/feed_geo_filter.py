"""피드 근접 필터 (글로벌 / 로컬 모드).

개인정보 공개 범위 같은 규칙은 알지 못한다. 그런 필터는 호출자가 위에 얹는다.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from src.domain.entities import ContentItem
from src.domain.value_objects.geo import GeoPoint, distance_meters


class ProximityMode(str, Enum):
    GLOBAL = "global"
    LOCAL = "local"


GLOBAL_RADIUS_M = 50_000_000
LOCAL_RADIUS_M = 25


def radius_for(mode: ProximityMode | str) -> float:
    mode = ProximityMode(mode)
    return GLOBAL_RADIUS_M if mode is ProximityMode.GLOBAL else LOCAL_RADIUS_M


def filter_within_radius(
    items: list[ContentItem],
    center: GeoPoint,
    radius_m: float,
) -> list[ContentItem]:
    """center에서 radius_m 이내 항목만 남긴다. 좌표 없는 항목은 제외."""
    return [
        item
        for item in items
        if item.location is not None
        and distance_meters(
            center.latitude, center.longitude, item.location.latitude, item.location.longitude
        )
        <= radius_m
    ]


def filter_by_proximity(
    items: list[ContentItem],
    current_location: Optional[GeoPoint],
    mode: ProximityMode | str,
) -> list[ContentItem]:
    """현재 위치 기준 근접 필터. 위치를 모르면 입력을 그대로 반환한다."""
    if current_location is None:
        return items
    return filter_within_radius(items, current_location, radius_for(mode))
