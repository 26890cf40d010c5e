"""유즈케이스: 현재 위치 기반 홈 피드.

최근 게시물을 근접 모드(글로벌/로컬)로 필터링하고,
보는 사람과의 거리와 현재 머무는 장소를 함께 돌려준다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from src.domain.entities import ContentItem, Venue
from src.domain.exceptions import UpstreamFetchError
from src.domain.repositories.content_repository import ContentStore
from src.domain.services.clock import Clock
from src.domain.services.feed_geo_filter import ProximityMode, filter_by_proximity
from src.domain.services.venue_detector import VenueDetector
from src.domain.value_objects.geo import GeoPoint, distance_between
from src.domain.value_objects.timeframe import Timeframe, resolve_timeframe

logger = logging.getLogger(__name__)


@dataclass
class NearbyFeed:
    mode: ProximityMode
    items: list[ContentItem] = field(default_factory=list)
    current_venue: Optional[Venue] = None


class GetNearbyFeedUseCase:
    def __init__(
        self,
        content_store: ContentStore,
        venue_detector: VenueDetector,
        clock: Clock,
        max_items: int = 100,
    ):
        self._content = content_store
        self._venues = venue_detector
        self._clock = clock
        self._max_items = max_items

    async def execute(
        self,
        current_location: Optional[GeoPoint],
        mode: ProximityMode | str = ProximityMode.GLOBAL,
        timeframe: str | Timeframe = Timeframe.MONTH,
        limit: int = 50,
    ) -> NearbyFeed:
        mode = ProximityMode(mode)
        since = resolve_timeframe(timeframe).boundary(self._clock.now())

        try:
            items = await self._content.query_recent(since, self._max_items)
        except Exception as e:
            logger.error(f"피드 게시물 조회 실패: {e}")
            raise UpstreamFetchError("get_nearby_feed", str(e)) from e

        kept = filter_by_proximity(items, current_location, mode)
        if current_location is not None:
            kept = [
                replace(item, distance_meters=distance_between(current_location, item.location))
                for item in kept
            ]
        else:
            logger.info("위치 정보 없음 — 전체 게시물 표시")

        venue = self._venues.detect(current_location)
        if venue:
            logger.info(f"현재 장소 감지: {venue.name}")

        return NearbyFeed(mode=mode, items=kept[:limit], current_venue=venue)
