"""유즈케이스: 트렌딩/주변 인기/팔로잉 활동 발견.

후보 조회 → (선택) 위치 필터 → 항목별 좋아요/댓글 조회 → 점수 계산 →
정렬/절단 → 캐시 저장 순서로 진행한다.
도메인 인터페이스에만 의존하며, 구체 저장소는 DI로 주입받는다.

실패 처리:
- 후보 집합 조회 실패는 UpstreamFetchError로 호출자에게 전파 ("결과 없음"과 구분).
- 개별 항목의 참여 조회 실패는 경고 로그 후 해당 항목을 참여 0으로 계속 진행.
- 위치 없음 / 팔로잉 없음은 오류가 아니라 빈 결과.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from src.application.discovery_cache import DiscoveryCache
from src.domain.entities import ContentItem, EngagementEvent, EngagementKind
from src.domain.exceptions import EngagementFetchError, UpstreamFetchError
from src.domain.repositories.content_repository import ContentStore
from src.domain.repositories.engagement_repository import EngagementStore
from src.domain.services import trending_scorer
from src.domain.services.clock import Clock
from src.domain.services.feed_geo_filter import filter_within_radius
from src.domain.value_objects.geo import GeoPoint
from src.domain.value_objects.timeframe import Timeframe, resolve_timeframe

logger = logging.getLogger(__name__)

CANDIDATE_CAP = 100
NEARBY_CANDIDATE_LIMIT = 50
FOLLOW_BATCH_SIZE = 10  # Firestore 'in' 쿼리 한도
FOLLOW_BATCH_CAP = 30


def build_cache_key(
    mode: str,
    timeframe: Timeframe,
    location: Optional[GeoPoint],
    radius: float,
    limit: int,
    precision: int = 2,
) -> str:
    """{mode}_{timeframe}_{location_bucket}_{limit} 형식의 캐시 키.

    위치는 격자로 반올림해 근접한 요청끼리 같은 키를 공유한다.
    반경이 다르면 결과가 달라지므로 버킷에 반경을 포함한다.
    """
    if location is None:
        bucket = "global"
    else:
        bucket = (
            f"{location.latitude:.{precision}f},{location.longitude:.{precision}f}"
            f"@{radius:g}"
        )
    return f"{mode}_{timeframe.value}_{bucket}_{limit}"


def chunked(values: list[str], size: int) -> list[list[str]]:
    return [values[i : i + size] for i in range(0, len(values), size)]


class DiscoveryEngine:
    """트렌딩 점수 기반 콘텐츠 발견."""

    def __init__(
        self,
        content_store: ContentStore,
        engagement_store: EngagementStore,
        cache: DiscoveryCache,
        clock: Clock,
        candidate_cap: int = CANDIDATE_CAP,
        nearby_candidate_limit: int = NEARBY_CANDIDATE_LIMIT,
        follow_batch_size: int = FOLLOW_BATCH_SIZE,
        follow_batch_cap: int = FOLLOW_BATCH_CAP,
        location_bucket_precision: int = 2,
    ):
        self._content = content_store
        self._engagement = engagement_store
        self._cache = cache
        self._clock = clock
        self._candidate_cap = candidate_cap
        self._nearby_candidate_limit = nearby_candidate_limit
        self._follow_batch_size = follow_batch_size
        self._follow_batch_cap = follow_batch_cap
        self._precision = location_bucket_precision

    async def get_trending(
        self,
        limit: int = 20,
        timeframe: str | Timeframe = Timeframe.DAY,
        location: Optional[GeoPoint] = None,
        radius: float = 25_000,
    ) -> list[ContentItem]:
        """트렌딩 점수 내림차순 항목. 각 항목에 점수와 참여 수가 채워진다."""
        tf = resolve_timeframe(timeframe)
        key = build_cache_key("trending", tf, location, radius, limit, self._precision)

        cached = self._cache.get(key)
        if cached is not None:
            logger.info(f"캐시된 트렌딩 반환: {key}")
            return cached

        logger.info(f"트렌딩 새로 계산: {key}")
        now = self._clock.now()
        since = tf.boundary(now)

        try:
            candidates = await self._content.query_recent(since, self._candidate_cap)
        except Exception as e:
            logger.error(f"트렌딩 후보 조회 실패: {e}")
            raise UpstreamFetchError("get_trending", str(e)) from e

        if location is not None:
            candidates = filter_within_radius(candidates, location, radius)

        # 모든 참여 조회가 끝난 뒤에만 정렬한다
        scored = await asyncio.gather(*(self._score_item(item, now) for item in candidates))

        ranked = sorted(scored, key=lambda item: item.trending.score, reverse=True)[:limit]
        self._cache.set(key, ranked)

        logger.info(f"트렌딩 {len(ranked)}건 (후보 {len(candidates)}건)")
        return ranked

    async def get_popular_nearby(
        self,
        location: Optional[GeoPoint],
        radius: float = 5_000,
        limit: int = 15,
        timeframe: str | Timeframe = Timeframe.WEEK,
    ) -> list[ContentItem]:
        """주변에서 참여가 있었던 인기 항목. 위치를 모르면 빈 리스트."""
        if location is None:
            logger.info("위치 정보 없음 — 주변 인기 항목 생략")
            return []

        trending = await self.get_trending(
            limit=self._nearby_candidate_limit,
            timeframe=timeframe,
            location=location,
            radius=radius,
        )
        popular = [
            item
            for item in trending
            if item.has_location and (item.total_likes > 0 or item.total_comments > 0)
        ]
        logger.info(f"반경 {radius:g}m 내 인기 항목 {len(popular[:limit])}건")
        return popular[:limit]

    async def get_following_activity(
        self,
        user_id: str,
        following_ids: list[str],
        limit: int = 10,
        timeframe: str | Timeframe = Timeframe.DAY,
    ) -> list[ContentItem]:
        """팔로우한 사용자들의 최근 항목 (최신순). 팔로잉이 없으면 빈 리스트."""
        if not following_ids:
            return []

        tf = resolve_timeframe(timeframe)
        since = tf.boundary(self._clock.now())
        batches = chunked(list(dict.fromkeys(following_ids)), self._follow_batch_size)

        try:
            results = await asyncio.gather(
                *(
                    self._content.query_by_authors(batch, since, self._follow_batch_cap)
                    for batch in batches
                )
            )
        except Exception as e:
            logger.error(f"[{user_id}] 팔로잉 활동 조회 실패: {e}")
            raise UpstreamFetchError("get_following_activity", str(e)) from e

        merged = [item for batch_items in results for item in batch_items]
        merged.sort(key=lambda item: item.created_at, reverse=True)

        logger.info(
            f"[{user_id}] 팔로잉 {len(following_ids)}명, 배치 {len(batches)}개, "
            f"활동 {len(merged)}건"
        )
        return merged[:limit]

    # ─── 내부 ───

    async def _score_item(self, item: ContentItem, now: datetime) -> ContentItem:
        results = await asyncio.gather(
            self._fetch_engagement(item.id, EngagementKind.LIKE),
            self._fetch_engagement(item.id, EngagementKind.COMMENT),
            return_exceptions=True,
        )
        likes, comments = (self._degrade_on_failure(r) for r in results)

        trending = trending_scorer.score(item, likes, comments, now)
        return replace(
            item,
            trending=trending,
            total_likes=len(likes),
            total_comments=len(comments),
            recent_activity=trending.recent_likes + trending.recent_comments,
        )

    async def _fetch_engagement(
        self, content_id: str, kind: EngagementKind
    ) -> list[EngagementEvent]:
        fetch = (
            self._engagement.likes_for
            if kind is EngagementKind.LIKE
            else self._engagement.comments_for
        )
        try:
            return await fetch(content_id)
        except Exception as e:
            raise EngagementFetchError(content_id, kind.value) from e

    @staticmethod
    def _degrade_on_failure(
        result: list[EngagementEvent] | BaseException,
    ) -> list[EngagementEvent]:
        if isinstance(result, EngagementFetchError):
            logger.warning(f"{result} — 참여 0으로 계속 진행: {result.__cause__}")
            return []
        if isinstance(result, BaseException):
            raise result
        return result
