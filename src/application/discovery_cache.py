"""발견 결과 시간 제한 캐시.

프로세스 전역 싱글턴이 아니라 컨테이너가 소유하는 인스턴스다.
항목은 경과 시간으로만 무효화되며, 같은 키로 다시 계산하면 덮어쓴다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from src.domain.entities import ContentItem
from src.domain.services.clock import Clock, SystemClock

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass
class CacheEntry:
    key: str
    items: list[ContentItem]
    computed_at: datetime


class DiscoveryCache:
    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Clock | None = None):
        self._ttl_seconds = ttl_seconds
        self._clock = clock or SystemClock()
        self._entries: dict[str, CacheEntry] = {}
        self._last_update: Optional[datetime] = None

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get(self, key: str) -> list[ContentItem] | None:
        """TTL 이내의 캐시 항목 사본. 없거나 만료되면 만료 항목을 모두 정리하고 None."""
        now = self._clock.now()
        entry = self._entries.get(key)
        if entry is not None and (now - entry.computed_at).total_seconds() < self._ttl_seconds:
            return list(entry.items)
        self._evict_expired(now)
        return None

    def set(self, key: str, items: list[ContentItem]) -> None:
        now = self._clock.now()
        self._entries[key] = CacheEntry(key=key, items=list(items), computed_at=now)
        self._last_update = now

    def clear(self) -> None:
        self._entries.clear()
        self._last_update = None
        logger.info("발견 캐시 초기화")

    def _evict_expired(self, now: datetime) -> None:
        expired = [
            key
            for key, entry in self._entries.items()
            if (now - entry.computed_at).total_seconds() >= self._ttl_seconds
        ]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"만료된 캐시 {len(expired)}건 제거")

    def stats(self) -> dict[str, Any]:
        """캐시 상태 요약 (대시보드/분석용)."""
        cache_age = None
        if self._last_update is not None:
            cache_age = (self._clock.now() - self._last_update).total_seconds()
        return {
            "size": len(self._entries),
            "ttl_seconds": self._ttl_seconds,
            "last_update": self._last_update.isoformat() if self._last_update else None,
            "cache_age_seconds": cache_age,
        }
