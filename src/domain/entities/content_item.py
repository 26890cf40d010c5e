from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from src.domain.entities.trending_score import TrendingScore
from src.domain.value_objects.geo import GeoPoint


@dataclass
class ContentItem:
    """게시된 사진 도메인 엔티티.

    발견 로직은 원본 항목을 변경하지 않는다. 점수/참여 수/거리 주석은
    dataclasses.replace로 만든 사본에만 채워진다.
    """

    id: str
    created_at: datetime

    location: Optional[GeoPoint] = None
    author_id: Optional[str] = None
    caption: Optional[str] = None
    image_url: Optional[str] = None
    venue_name: Optional[str] = None
    hashtags: list[str] = field(default_factory=list)

    # 발견 결과 주석
    trending: Optional[TrendingScore] = None
    total_likes: int = 0
    total_comments: int = 0
    recent_activity: int = 0
    distance_meters: Optional[float] = None

    @property
    def has_location(self) -> bool:
        return self.location is not None
