"""의존성 주입 컨테이너.

클린 아키텍처에서 모든 의존성 조립은 최외곽(Composition Root)에서 이루어진다.
캐시도 여기서 생성되어 컨테이너 수명과 함께한다 (모듈 전역 상태 없음).
"""

from __future__ import annotations

from src.application.discovery_cache import DiscoveryCache
from src.application.use_cases.discovery_engine import DiscoveryEngine
from src.application.use_cases.nearby_feed import GetNearbyFeedUseCase
from src.application.use_cases.trending_hashtags import GetTrendingHashtagsUseCase
from src.domain.repositories.content_repository import ContentStore
from src.domain.repositories.engagement_repository import EngagementStore
from src.domain.services.clock import Clock, SystemClock
from src.domain.services.venue_detector import VenueDetector
from src.infrastructure.config.settings import AppConfig, Settings
from src.infrastructure.database.repositories.content_repo import FirestoreContentRepository
from src.infrastructure.database.repositories.engagement_repo import (
    FirestoreEngagementRepository,
)


class Container:
    """애플리케이션 의존성 컨테이너."""

    def __init__(
        self,
        settings: Settings,
        app_config: AppConfig,
        firestore_db=None,
        content_store: ContentStore | None = None,
        engagement_store: EngagementStore | None = None,
        clock: Clock | None = None,
    ):
        self.settings = settings
        self.config = app_config
        self.clock = clock or SystemClock()

        # ─── Repositories (Firebase Firestore) ───
        self.content_store = content_store or FirestoreContentRepository(firestore_db)
        self.engagement_store = engagement_store or FirestoreEngagementRepository(firestore_db)

        # ─── Domain Services ───
        self.venue_detector = VenueDetector(app_config.venues)

        discovery = app_config.discovery
        self.cache = DiscoveryCache(ttl_seconds=discovery.cache_ttl_seconds, clock=self.clock)
        self.discovery_engine = DiscoveryEngine(
            content_store=self.content_store,
            engagement_store=self.engagement_store,
            cache=self.cache,
            clock=self.clock,
            candidate_cap=discovery.candidate_cap,
            nearby_candidate_limit=discovery.nearby_candidate_limit,
            follow_batch_size=discovery.follow_batch_size,
            follow_batch_cap=discovery.follow_batch_cap,
            location_bucket_precision=discovery.location_bucket_precision,
        )

    # ─── Use Case 팩토리 ───

    def trending_hashtags_use_case(self) -> GetTrendingHashtagsUseCase:
        return GetTrendingHashtagsUseCase(
            content_store=self.content_store,
            clock=self.clock,
            scan_limit=self.config.discovery.hashtag_scan_limit,
        )

    def nearby_feed_use_case(self) -> GetNearbyFeedUseCase:
        return GetNearbyFeedUseCase(
            content_store=self.content_store,
            venue_detector=self.venue_detector,
            clock=self.clock,
            max_items=self.config.feed.max_items,
        )
