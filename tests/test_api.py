"""HTTP surface: error vs. empty-by-design must be distinguishable."""
import pytest
from fastapi.testclient import TestClient

from fakes import NORTH_MARKET, FakeContentStore, FakeEngagementStore, FixedClock, comments, likes, make_item
from src.infrastructure.config.container import Container
from src.infrastructure.config.settings import AppConfig, Settings
from src.presentation.web.app import create_app

CONFIG = {
    "venues": [
        {
            "name": "North Market",
            "latitude": NORTH_MARKET.latitude,
            "longitude": NORTH_MARKET.longitude,
            "radius_meters": 150,
        }
    ]
}


@pytest.fixture
def content():
    return FakeContentStore(
        [
            make_item("hot", hours_ago=1, location=NORTH_MARKET, hashtags=["cbus"]),
            make_item("calm", hours_ago=4, hashtags=["cbus", "coffee"]),
        ]
    )


@pytest.fixture
def client(content):
    engagement = FakeEngagementStore(
        likes={"hot": likes("hot", 4)},
        comments={"calm": comments("calm", 1)},
    )
    container = Container(
        settings=Settings(),
        app_config=AppConfig(CONFIG),
        content_store=content,
        engagement_store=engagement,
        clock=FixedClock(),
    )
    return TestClient(create_app(container))


def test_trending_endpoint(client):
    resp = client.get("/api/discovery/trending", params={"timeframe": "24h"})
    assert resp.status_code == 200
    body = resp.json()
    assert [p["id"] for p in body] == ["hot", "calm"]
    assert body[0]["trending"]["recent_likes"] == 4
    assert body[0]["latitude"] == NORTH_MARKET.latitude


def test_trending_upstream_failure_is_502(client, content):
    content.fail = True
    resp = client.get("/api/discovery/trending")
    assert resp.status_code == 502
    assert "error" in resp.json()


def test_nearby_without_location_is_empty_200(client, content):
    resp = client.get("/api/discovery/nearby")
    assert resp.status_code == 200
    assert resp.json() == []
    assert content.call_count == 0


def test_nearby_with_location(client):
    resp = client.get(
        "/api/discovery/nearby",
        params={"lat": NORTH_MARKET.latitude, "lng": NORTH_MARKET.longitude},
    )
    assert [p["id"] for p in resp.json()] == ["hot"]


def test_following_without_follows_is_empty(client, content):
    resp = client.get("/api/discovery/following", params={"user_id": "me"})
    assert resp.status_code == 200
    assert resp.json() == []
    assert content.call_count == 0


def test_following_with_follows(client):
    resp = client.get(
        "/api/discovery/following",
        params=[("user_id", "me"), ("following", "u1"), ("following", "u9")],
    )
    assert [p["id"] for p in resp.json()] == ["hot", "calm"]


def test_hashtags_endpoint(client):
    resp = client.get("/api/discovery/hashtags")
    assert resp.json() == [{"hashtag": "cbus", "count": 2}, {"hashtag": "coffee", "count": 1}]


def test_local_feed_reports_distance_and_venue(client):
    resp = client.get(
        "/api/feed",
        params={"lat": NORTH_MARKET.latitude, "lng": NORTH_MARKET.longitude, "mode": "local"},
    )
    body = resp.json()
    assert body["mode"] == "local"
    assert body["current_venue"]["name"] == "North Market"
    assert [p["id"] for p in body["items"]] == ["hot"]
    assert body["items"][0]["distance"] == "0m"


def test_venue_detection_endpoint(client):
    hit = client.get("/api/venues/detect", params={"lat": 39.9612, "lng": -82.9988})
    miss = client.get("/api/venues/detect", params={"lat": 0, "lng": 0})
    assert hit.json()["venue"]["name"] == "North Market"
    assert miss.json() == {"venue": None}


def test_cache_stats_and_clear(client):
    client.get("/api/discovery/trending")
    assert client.get("/api/discovery/cache").json()["size"] == 1

    assert client.post("/api/discovery/cache/clear").json() == {"status": "cleared"}
    assert client.get("/api/discovery/cache").json()["size"] == 0
