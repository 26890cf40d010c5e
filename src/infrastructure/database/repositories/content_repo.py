"""ContentStore — Firebase Firestore 구현 (읽기 전용).

Firestore 컬렉션: 'photos'
필드: uid, timestamp, latitude, longitude, caption, imageUrl, venueName, hashtags
"""

from __future__ import annotations

import asyncio
from datetime import datetime

from src.domain.entities import ContentItem
from src.domain.value_objects.geo import GeoPoint


def _content_from_doc(doc) -> ContentItem:
    d = doc.to_dict()
    lat, lng = d.get("latitude"), d.get("longitude")
    location = GeoPoint(float(lat), float(lng)) if lat is not None and lng is not None else None
    return ContentItem(
        id=doc.id,
        created_at=d.get("timestamp"),
        location=location,
        author_id=d.get("uid"),
        caption=d.get("caption"),
        image_url=d.get("imageUrl"),
        venue_name=d.get("venueName"),
        hashtags=d.get("hashtags") or [],
    )


class FirestoreContentRepository:
    """Firestore 기반 ContentStore 구현."""

    COLLECTION = "photos"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    async def query_recent(self, since: datetime, max_count: int) -> list[ContentItem]:
        def _query():
            query = (
                self._col()
                .where("timestamp", ">=", since)
                .order_by("timestamp", direction="DESCENDING")
                .limit(max_count)
            )
            return [_content_from_doc(doc) for doc in query.stream()]

        return await asyncio.to_thread(_query)

    async def query_by_authors(
        self, author_ids: list[str], since: datetime, max_count: int
    ) -> list[ContentItem]:
        def _query():
            query = (
                self._col()
                .where("uid", "in", author_ids)
                .where("timestamp", ">=", since)
                .order_by("timestamp", direction="DESCENDING")
                .limit(max_count)
            )
            return [_content_from_doc(doc) for doc in query.stream()]

        return await asyncio.to_thread(_query)
