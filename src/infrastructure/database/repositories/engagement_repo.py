"""EngagementStore — Firebase Firestore 구현 (읽기 전용).

Firestore 컬렉션: 'likes', 'comments'
필드: photoId, uid, timestamp
존재하지 않는 컬렉션은 빈 결과를 반환하므로 별도 처리가 필요 없다.
"""

from __future__ import annotations

import asyncio

from src.domain.entities import EngagementEvent, EngagementKind


def _event_from_doc(doc, kind: EngagementKind) -> EngagementEvent:
    d = doc.to_dict()
    return EngagementEvent(
        target_id=d.get("photoId", ""),
        kind=kind,
        occurred_at=d.get("timestamp"),
        user_id=d.get("uid"),
    )


class FirestoreEngagementRepository:
    """Firestore 기반 EngagementStore 구현."""

    LIKES = "likes"
    COMMENTS = "comments"

    def __init__(self, db):
        self._db = db

    async def _events_for(
        self, collection: str, content_id: str, kind: EngagementKind
    ) -> list[EngagementEvent]:
        def _query():
            query = self._db.collection(collection).where("photoId", "==", content_id)
            events = []
            for doc in query.stream():
                event = _event_from_doc(doc, kind)
                # 서버 타임스탬프가 아직 확정되지 않은 문서
                if event.occurred_at is not None:
                    events.append(event)
            return events

        return await asyncio.to_thread(_query)

    async def likes_for(self, content_id: str) -> list[EngagementEvent]:
        return await self._events_for(self.LIKES, content_id, EngagementKind.LIKE)

    async def comments_for(self, content_id: str) -> list[EngagementEvent]:
        return await self._events_for(self.COMMENTS, content_id, EngagementKind.COMMENT)
