"""Firestore adapters, driven by a minimal in-memory stand-in for the client."""
import asyncio

from fakes import NOW
from src.domain.entities import EngagementKind
from src.domain.value_objects.geo import GeoPoint
from src.infrastructure.database.repositories.content_repo import FirestoreContentRepository
from src.infrastructure.database.repositories.engagement_repo import (
    FirestoreEngagementRepository,
)


class _Doc:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    def to_dict(self):
        return dict(self._data)


class _Query:
    def __init__(self, db, name, docs):
        self._db = db
        self._name = name
        self._docs = docs

    def where(self, field, op, value):
        self._db.calls.append((self._name, "where", field, op, value))
        return self

    def order_by(self, field, direction=None):
        self._db.calls.append((self._name, "order_by", field, direction))
        return self

    def limit(self, n):
        self._db.calls.append((self._name, "limit", n))
        return self

    def stream(self):
        return iter(self._docs)


class _Db:
    def __init__(self, collections):
        self.collections = collections
        self.calls = []

    def collection(self, name):
        return _Query(self, name, self.collections.get(name, []))


def test_content_docs_map_to_items():
    db = _Db(
        {
            "photos": [
                _Doc(
                    "p1",
                    {
                        "uid": "u1",
                        "timestamp": NOW,
                        "latitude": 39.96,
                        "longitude": -82.99,
                        "hashtags": ["cbus"],
                        "imageUrl": "https://img/p1.jpg",
                    },
                ),
                _Doc("p2", {"uid": "u2", "timestamp": NOW, "latitude": None}),
            ]
        }
    )
    items = asyncio.run(FirestoreContentRepository(db).query_recent(NOW, 100))

    assert items[0].location == GeoPoint(39.96, -82.99)
    assert items[0].hashtags == ["cbus"]
    assert items[0].image_url == "https://img/p1.jpg"
    assert items[1].location is None
    assert items[1].hashtags == []
    assert ("photos", "limit", 100) in db.calls


def test_author_query_uses_in_filter():
    db = _Db({"photos": []})
    asyncio.run(FirestoreContentRepository(db).query_by_authors(["u1", "u2"], NOW, 30))
    assert ("photos", "where", "uid", "in", ["u1", "u2"]) in db.calls
    assert ("photos", "order_by", "timestamp", "DESCENDING") in db.calls


def test_engagement_events_skip_pending_timestamps():
    db = _Db(
        {
            "likes": [
                _Doc("l1", {"photoId": "p1", "uid": "fan", "timestamp": NOW}),
                _Doc("l2", {"photoId": "p1", "uid": "fan2", "timestamp": None}),
            ]
        }
    )
    repo = FirestoreEngagementRepository(db)
    events = asyncio.run(repo.likes_for("p1"))

    assert len(events) == 1
    assert events[0].kind is EngagementKind.LIKE
    assert events[0].user_id == "fan"
    assert ("likes", "where", "photoId", "==", "p1") in db.calls


def test_missing_comments_collection_is_empty():
    repo = FirestoreEngagementRepository(_Db({}))
    assert asyncio.run(repo.comments_for("p1")) == []
