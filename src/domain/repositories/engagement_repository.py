from __future__ import annotations

from typing import Protocol

from src.domain.entities import EngagementEvent


class EngagementStore(Protocol):
    """좋아요/댓글 조회 인터페이스.

    컬렉션이 아직 없으면 빈 리스트를 반환한다 (오류 아님).
    """

    async def likes_for(self, content_id: str) -> list[EngagementEvent]: ...

    async def comments_for(self, content_id: str) -> list[EngagementEvent]: ...
