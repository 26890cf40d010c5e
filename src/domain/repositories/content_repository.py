from __future__ import annotations

from datetime import datetime
from typing import Protocol

from src.domain.entities import ContentItem


class ContentStore(Protocol):
    """게시물 조회 인터페이스 (읽기 전용)."""

    async def query_recent(self, since: datetime, max_count: int) -> list[ContentItem]:
        """since 이후 생성된 항목을 최신순으로 최대 max_count건 조회."""
        ...

    async def query_by_authors(
        self,
        author_ids: list[str],
        since: datetime,
        max_count: int,
    ) -> list[ContentItem]:
        """지정 작성자들의 항목 조회. author_ids 분할은 호출자 책임 (저장소 배치 한도)."""
        ...
