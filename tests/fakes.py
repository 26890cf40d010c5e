"""In-memory content/engagement stores and a controllable clock for tests."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from src.domain.entities import ContentItem, EngagementEvent, EngagementKind
from src.domain.value_objects.geo import GeoPoint

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

# Columbus, OH — the North Market venue
NORTH_MARKET = GeoPoint(39.9612, -82.9988)


class FixedClock:
    def __init__(self, now: datetime = NOW):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs) -> None:
        self._now += timedelta(**kwargs)


class FakeContentStore:
    def __init__(self, items: list[ContentItem] | None = None, fail: bool = False):
        self.items = list(items or [])
        self.fail = fail
        self.recent_calls: list[tuple[datetime, int]] = []
        self.author_calls: list[list[str]] = []

    async def query_recent(self, since, max_count):
        self.recent_calls.append((since, max_count))
        if self.fail:
            raise RuntimeError("firestore unavailable")
        matched = [i for i in self.items if i.created_at >= since]
        matched.sort(key=lambda i: i.created_at, reverse=True)
        return matched[:max_count]

    async def query_by_authors(self, author_ids, since, max_count):
        self.author_calls.append(list(author_ids))
        if self.fail:
            raise RuntimeError("firestore unavailable")
        matched = [i for i in self.items if i.author_id in author_ids and i.created_at >= since]
        matched.sort(key=lambda i: i.created_at, reverse=True)
        return matched[:max_count]

    @property
    def call_count(self) -> int:
        return len(self.recent_calls) + len(self.author_calls)


class FakeEngagementStore:
    def __init__(self, likes=None, comments=None, failing: set[str] | None = None):
        self.likes: dict[str, list[EngagementEvent]] = likes or {}
        self.comments: dict[str, list[EngagementEvent]] = comments or {}
        self.failing = failing or set()

    async def likes_for(self, content_id):
        if content_id in self.failing:
            raise RuntimeError(f"likes query failed for {content_id}")
        return self.likes.get(content_id, [])

    async def comments_for(self, content_id):
        if content_id in self.failing:
            raise RuntimeError(f"comments query failed for {content_id}")
        return self.comments.get(content_id, [])


def make_item(item_id, hours_ago=1.0, location=None, author_id="u1", hashtags=None):
    return ContentItem(
        id=item_id,
        created_at=NOW - timedelta(hours=hours_ago),
        location=location,
        author_id=author_id,
        hashtags=hashtags or [],
    )


def events(target_id, kind, count, hours_ago=1.0):
    return [
        EngagementEvent(
            target_id=target_id,
            kind=kind,
            occurred_at=NOW - timedelta(hours=hours_ago),
            user_id=f"fan{n}",
        )
        for n in range(count)
    ]


def likes(target_id, count, hours_ago=1.0):
    return events(target_id, EngagementKind.LIKE, count, hours_ago)


def comments(target_id, count, hours_ago=1.0):
    return events(target_id, EngagementKind.COMMENT, count, hours_ago)
