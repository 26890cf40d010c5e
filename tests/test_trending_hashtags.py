"""Trending hashtag counts over recent posts."""
import asyncio
from datetime import timedelta

import pytest

from fakes import NOW, FakeContentStore, make_item
from src.application.use_cases.trending_hashtags import GetTrendingHashtagsUseCase
from src.domain.exceptions import UpstreamFetchError


def test_hashtags_ranked_by_count(clock):
    items = [
        make_item("a", hours_ago=1, hashtags=["sunset", "columbus"]),
        make_item("b", hours_ago=2, hashtags=["coffee", "columbus"]),
        make_item("c", hours_ago=3, hashtags=["columbus", "sunset"]),
        make_item("d", hours_ago=24 * 10, hashtags=["coffee", "coffee"]),
    ]
    uc = GetTrendingHashtagsUseCase(FakeContentStore(items), clock)
    result = asyncio.run(uc.execute(days_back=7))

    assert [(t.hashtag, t.count) for t in result] == [
        ("columbus", 3),
        ("sunset", 2),
        ("coffee", 1),
    ]


def test_ties_keep_first_seen_order(clock):
    items = [
        make_item("a", hours_ago=1, hashtags=["zeta"]),
        make_item("b", hours_ago=2, hashtags=["alpha"]),
    ]
    uc = GetTrendingHashtagsUseCase(FakeContentStore(items), clock)
    assert [t.hashtag for t in asyncio.run(uc.execute())] == ["zeta", "alpha"]


def test_limit_and_scan_window(clock):
    store = FakeContentStore([make_item(f"p{n}", hashtags=[f"t{n}"]) for n in range(5)])
    uc = GetTrendingHashtagsUseCase(store, clock, scan_limit=500)
    result = asyncio.run(uc.execute(days_back=3, limit=2))
    assert len(result) == 2
    assert store.recent_calls == [(NOW - timedelta(days=3), 500)]


def test_store_failure_raises(clock):
    uc = GetTrendingHashtagsUseCase(FakeContentStore(fail=True), clock)
    with pytest.raises(UpstreamFetchError):
        asyncio.run(uc.execute())
