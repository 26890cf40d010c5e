from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrendingScore:
    """단일 항목의 트렌딩 점수 계산 결과 (저장하지 않음)."""

    score: float
    engagement_score: float
    velocity: float
    time_decay_factor: float
    age_in_hours: float
    recent_likes: int
    recent_comments: int
