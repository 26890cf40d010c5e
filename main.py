"""Photo Discovery — 엔트리포인트.

1. 설정 로드 (.env + config/settings.yaml)
2. Firebase Firestore 초기화
3. 의존성 컨테이너 조립
4. 웹 서버 시작 또는 트렌딩 즉시 조회

트렌딩 점수, 주변 인기 사진, 팔로잉 활동, 근접 피드를 JSON API로 제공한다.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import uvicorn

# 프로젝트 루트를 sys.path에 추가
sys.path.insert(0, str(Path(__file__).parent))

from src.domain.exceptions import UpstreamFetchError
from src.domain.value_objects.geo import GeoPoint, distance_between, format_distance
from src.infrastructure.config.container import Container
from src.infrastructure.config.settings import AppConfig, Settings, load_app_config
from src.infrastructure.database.firebase_client import init_firebase
from src.presentation.web.app import create_app


logger = logging.getLogger(__name__)


def setup_logging() -> None:
    Path("logs").mkdir(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler("logs/app.log", encoding="utf-8"),
        ],
    )


def build_container(settings: Settings, config: AppConfig) -> Container:
    db = init_firebase(
        credential_path=settings.firebase_credential_path,
        project_id=settings.firebase_project_id or None,
    )
    return Container(settings=settings, app_config=config, firestore_db=db)


async def run_server(settings: Settings, config: AppConfig) -> None:
    """API 서버 실행."""
    container = build_container(settings, config)

    app = create_app(container)
    server_config = uvicorn.Config(
        app,
        host=config.web.host,
        port=config.web.port,
        log_level="info",
    )
    server = uvicorn.Server(server_config)

    logger.info(
        f"서버 시작: http://{config.web.host}:{config.web.port} "
        f"(장소 {len(config.venues)}곳, 캐시 TTL {config.discovery.cache_ttl_seconds:g}초)"
    )
    await server.serve()


async def run_trending_now(
    settings: Settings,
    config: AppConfig,
    timeframe: str,
    limit: int,
    location: GeoPoint | None,
    radius: float,
) -> int:
    """트렌딩 사진을 즉시 계산해 출력."""
    container = build_container(settings, config)

    try:
        items = await container.discovery_engine.get_trending(
            limit=limit, timeframe=timeframe, location=location, radius=radius
        )
    except UpstreamFetchError as e:
        print(f"트렌딩 조회 실패: {e}")
        return 1

    if not items:
        print("트렌딩 사진 없음")
        return 0

    for rank, item in enumerate(items, start=1):
        t = item.trending
        where = ""
        if location and item.location:
            where = f" · {format_distance(distance_between(location, item.location))}"
        print(
            f"{rank:>2}. {item.id}  score={t.score:.3f}  "
            f"likes={t.recent_likes}/{item.total_likes}  "
            f"comments={t.recent_comments}/{item.total_comments}  "
            f"age={t.age_in_hours:.1f}h{where}"
        )
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Photo Discovery")
    subparsers = parser.add_subparsers(dest="command", help="실행 명령")

    # serve 명령
    subparsers.add_parser("serve", help="API 서버 시작")

    # trending 명령
    trending_parser = subparsers.add_parser("trending", help="트렌딩 사진 즉시 조회")
    trending_parser.add_argument(
        "--timeframe", default="24h", choices=["1h", "24h", "7d", "30d"], help="기간 (기본: 24h)"
    )
    trending_parser.add_argument("--limit", type=int, default=20, help="최대 건수 (기본: 20)")
    trending_parser.add_argument("--lat", type=float, help="중심 위도")
    trending_parser.add_argument("--lng", type=float, help="중심 경도")
    trending_parser.add_argument("--radius", type=float, default=25_000, help="반경 m (기본: 25000)")

    args = parser.parse_args()

    settings = Settings()
    config = load_app_config()

    if args.command == "serve":
        setup_logging()
        asyncio.run(run_server(settings, config))
    elif args.command == "trending":
        setup_logging()
        location = None
        if args.lat is not None and args.lng is not None:
            location = GeoPoint(latitude=args.lat, longitude=args.lng)
        code = asyncio.run(
            run_trending_now(settings, config, args.timeframe, args.limit, location, args.radius)
        )
        sys.exit(code)
    else:
        parser.print_help()
        print("\n사용 방법:")
        print("  python main.py serve                                # API 서버 시작")
        print("  python main.py trending --timeframe 7d              # 지난 7일 트렌딩")
        print("  python main.py trending --lat 39.96 --lng -82.99    # 특정 위치 주변 트렌딩")


if __name__ == "__main__":
    main()
