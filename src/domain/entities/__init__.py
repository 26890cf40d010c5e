from src.domain.entities.content_item import ContentItem
from src.domain.entities.engagement import EngagementEvent, EngagementKind
from src.domain.entities.hashtag import HashtagCount
from src.domain.entities.trending_score import TrendingScore
from src.domain.entities.venue import Venue

__all__ = [
    "ContentItem",
    "EngagementEvent",
    "EngagementKind",
    "HashtagCount",
    "TrendingScore",
    "Venue",
]
