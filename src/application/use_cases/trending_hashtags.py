"""유즈케이스: 트렌딩 해시태그.

최근 게시물을 훑어 기간 내 해시태그 사용 횟수를 집계한다.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from src.domain.entities import HashtagCount
from src.domain.exceptions import UpstreamFetchError
from src.domain.repositories.content_repository import ContentStore
from src.domain.services.clock import Clock

logger = logging.getLogger(__name__)

SCAN_LIMIT = 500


class GetTrendingHashtagsUseCase:
    def __init__(self, content_store: ContentStore, clock: Clock, scan_limit: int = SCAN_LIMIT):
        self._content = content_store
        self._clock = clock
        self._scan_limit = scan_limit

    async def execute(self, days_back: int = 7, limit: int = 20) -> list[HashtagCount]:
        """사용 횟수 내림차순. 동률은 먼저 등장한 해시태그가 앞선다."""
        since = self._clock.now() - timedelta(days=days_back)
        try:
            items = await self._content.query_recent(since, self._scan_limit)
        except Exception as e:
            logger.error(f"해시태그 집계용 게시물 조회 실패: {e}")
            raise UpstreamFetchError("get_trending_hashtags", str(e)) from e

        counts: dict[str, int] = {}
        for item in items:
            for tag in item.hashtags:
                counts[tag] = counts.get(tag, 0) + 1

        ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:limit]
        logger.info(f"최근 {days_back}일 트렌딩 해시태그 {len(ranked)}개 (게시물 {len(items)}건)")
        return [HashtagCount(hashtag=tag, count=count) for tag, count in ranked]
