"""REST API 라우트 — 발견 탭과 홈 피드가 호출하는 JSON 엔드포인트.

후보 조회 실패(UpstreamFetchError)는 502로, 위치/팔로잉 없음은 200 빈 리스트로 응답해
클라이언트가 "오류"와 "결과 없음"을 구분할 수 있게 한다.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from src.domain.entities import ContentItem, Venue
from src.domain.exceptions import UpstreamFetchError
from src.domain.services.feed_geo_filter import ProximityMode
from src.domain.value_objects.geo import GeoPoint, format_distance

router = APIRouter(tags=["api"])


def _get_container(request: Request):
    return request.app.state.container


def _location(lat: float | None, lng: float | None) -> Optional[GeoPoint]:
    if lat is None or lng is None:
        return None
    return GeoPoint(latitude=lat, longitude=lng)


def _upstream_error(e: UpstreamFetchError) -> JSONResponse:
    return JSONResponse(status_code=502, content={"error": str(e)})


def _venue_to_dict(v: Venue | None) -> dict[str, Any] | None:
    if v is None:
        return None
    return {
        "name": v.name,
        "latitude": v.latitude,
        "longitude": v.longitude,
        "radius_meters": v.radius_meters,
    }


def _item_to_dict(item: ContentItem) -> dict[str, Any]:
    t = item.trending
    return {
        "id": item.id,
        "author_id": item.author_id,
        "caption": item.caption,
        "image_url": item.image_url,
        "hashtags": item.hashtags,
        "venue_name": item.venue_name,
        "created_at": item.created_at.isoformat() if item.created_at else None,
        "latitude": item.location.latitude if item.location else None,
        "longitude": item.location.longitude if item.location else None,
        "total_likes": item.total_likes,
        "total_comments": item.total_comments,
        "recent_activity": item.recent_activity,
        "distance": (
            format_distance(item.distance_meters) if item.distance_meters is not None else None
        ),
        "trending": (
            {
                "score": t.score,
                "engagement_score": t.engagement_score,
                "velocity": t.velocity,
                "time_decay_factor": t.time_decay_factor,
                "age_in_hours": t.age_in_hours,
                "recent_likes": t.recent_likes,
                "recent_comments": t.recent_comments,
            }
            if t
            else None
        ),
    }


@router.get("/discovery/trending")
async def trending(
    request: Request,
    limit: int = Query(20, ge=1, le=100),
    timeframe: str = "24h",
    lat: float | None = None,
    lng: float | None = None,
    radius: float = Query(25_000, gt=0),
):
    """트렌딩 사진. lat/lng를 주면 radius(m) 이내로 제한."""
    c = _get_container(request)
    try:
        items = await c.discovery_engine.get_trending(
            limit=limit, timeframe=timeframe, location=_location(lat, lng), radius=radius
        )
    except UpstreamFetchError as e:
        return _upstream_error(e)
    return [_item_to_dict(i) for i in items]


@router.get("/discovery/nearby")
async def popular_nearby(
    request: Request,
    lat: float | None = None,
    lng: float | None = None,
    radius: float = Query(5_000, gt=0),
    limit: int = Query(15, ge=1, le=100),
    timeframe: str = "7d",
):
    """주변 인기 사진. 위치가 없으면 빈 리스트."""
    c = _get_container(request)
    try:
        items = await c.discovery_engine.get_popular_nearby(
            _location(lat, lng), radius=radius, limit=limit, timeframe=timeframe
        )
    except UpstreamFetchError as e:
        return _upstream_error(e)
    return [_item_to_dict(i) for i in items]


@router.get("/discovery/following")
async def following_activity(
    request: Request,
    user_id: str,
    following: list[str] = Query(default=[]),
    limit: int = Query(10, ge=1, le=100),
    timeframe: str = "24h",
):
    """팔로우한 사용자들의 최근 사진."""
    c = _get_container(request)
    try:
        items = await c.discovery_engine.get_following_activity(
            user_id, following, limit=limit, timeframe=timeframe
        )
    except UpstreamFetchError as e:
        return _upstream_error(e)
    return [_item_to_dict(i) for i in items]


@router.get("/discovery/hashtags")
async def trending_hashtags(
    request: Request,
    days_back: int = Query(7, ge=1, le=90),
    limit: int = Query(20, ge=1, le=100),
):
    c = _get_container(request)
    try:
        tags = await c.trending_hashtags_use_case().execute(days_back=days_back, limit=limit)
    except UpstreamFetchError as e:
        return _upstream_error(e)
    return [{"hashtag": t.hashtag, "count": t.count} for t in tags]


@router.get("/feed")
async def feed(
    request: Request,
    lat: float | None = None,
    lng: float | None = None,
    mode: ProximityMode = ProximityMode.GLOBAL,
    timeframe: str | None = None,
    limit: int = Query(50, ge=1, le=200),
):
    """홈 피드. 위치가 없으면 필터링 없이 최근 사진 전체."""
    c = _get_container(request)
    try:
        result = await c.nearby_feed_use_case().execute(
            _location(lat, lng),
            mode=mode,
            timeframe=timeframe or c.config.feed.default_timeframe,
            limit=limit,
        )
    except UpstreamFetchError as e:
        return _upstream_error(e)
    return {
        "mode": result.mode.value,
        "current_venue": _venue_to_dict(result.current_venue),
        "items": [_item_to_dict(i) for i in result.items],
    }


@router.get("/venues/detect")
async def detect_venue(request: Request, lat: float, lng: float):
    """좌표가 속한 알려진 장소."""
    c = _get_container(request)
    venue = c.venue_detector.detect(GeoPoint(latitude=lat, longitude=lng))
    return {"venue": _venue_to_dict(venue)}


@router.get("/discovery/cache")
async def cache_stats(request: Request):
    """발견 캐시 상태."""
    return _get_container(request).cache.stats()


@router.post("/discovery/cache/clear")
async def clear_cache(request: Request):
    _get_container(request).cache.clear()
    return {"status": "cleared"}
