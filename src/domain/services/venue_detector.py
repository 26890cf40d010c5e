from __future__ import annotations

from typing import Iterable, Optional

from src.domain.entities import Venue
from src.domain.value_objects.geo import GeoPoint, distance_meters


def detect_venue(location: Optional[GeoPoint], venues: Iterable[Venue]) -> Optional[Venue]:
    """location이 반경 안에 들어가는 첫 번째 장소.

    반경이 겹치면 목록 순서상 앞선 장소가 선택된다.
    """
    if location is None:
        return None
    for venue in venues:
        d = distance_meters(location.latitude, location.longitude, venue.latitude, venue.longitude)
        if d <= venue.radius_meters:
            return venue
    return None


class VenueDetector:
    """생성 시 주어진 고정 장소 목록에 대해 장소를 판별한다."""

    def __init__(self, venues: Iterable[Venue]):
        self._venues: tuple[Venue, ...] = tuple(venues)

    @property
    def venues(self) -> tuple[Venue, ...]:
        return self._venues

    def detect(self, location: Optional[GeoPoint]) -> Optional[Venue]:
        return detect_venue(location, self._venues)
