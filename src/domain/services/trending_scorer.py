"""트렌딩 점수 계산.

참여 속도(최근 24시간 가중 참여 / 경과 시간)에 시간 감쇠 보너스를 곱한다.

    age      = max(0.5, 경과 시간(h))
    engage   = 최근 좋아요 × 1.0 + 최근 댓글 × 2.0
    velocity = engage / age
    decay    = exp(-age / 24)
    score    = velocity × (1 + decay)

가중치와 기간은 어떤 게시물이 트렌딩에 오르는지를 직접 결정하는 제품 상수다.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Iterable

from src.domain.entities import ContentItem, EngagementEvent, TrendingScore

MIN_AGE_HOURS = 0.5
RECENT_WINDOW = timedelta(hours=24)
LIKE_WEIGHT = 1.0
COMMENT_WEIGHT = 2.0
DECAY_HOURS = 24.0


def age_in_hours(created_at: datetime, now: datetime) -> float:
    """경과 시간(h). 30분 미만이거나 미래 시각(시계 오차)이면 0.5로 고정."""
    hours = (now - created_at).total_seconds() / 3600
    return max(MIN_AGE_HOURS, hours)


def count_recent(events: Iterable[EngagementEvent], now: datetime) -> int:
    """24시간 이내 이벤트 수. 창 밖의 이벤트는 감쇠 없이 무시."""
    return sum(1 for e in events if now - e.occurred_at < RECENT_WINDOW)


def score(
    item: ContentItem,
    likes: list[EngagementEvent],
    comments: list[EngagementEvent],
    now: datetime,
) -> TrendingScore:
    age = age_in_hours(item.created_at, now)
    recent_likes = count_recent(likes, now)
    recent_comments = count_recent(comments, now)

    engagement_score = recent_likes * LIKE_WEIGHT + recent_comments * COMMENT_WEIGHT
    velocity = engagement_score / age
    time_decay_factor = math.exp(-age / DECAY_HOURS)

    return TrendingScore(
        score=velocity * (1 + time_decay_factor),
        engagement_score=engagement_score,
        velocity=velocity,
        time_decay_factor=time_decay_factor,
        age_in_hours=age,
        recent_likes=recent_likes,
        recent_comments=recent_comments,
    )
