from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings

from src.domain.entities import Venue
from src.domain.exceptions import ConfigurationError


# ──────────────────────────────────────────
# 환경변수 기반 시크릿 설정 (.env)
# ──────────────────────────────────────────
class Settings(BaseSettings):
    # Firebase
    firebase_credential_path: str = "firebase-service-account.json"
    firebase_project_id: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# ──────────────────────────────────────────
# YAML 기반 앱 설정 (config/settings.yaml)
# ──────────────────────────────────────────
class DiscoveryConfig:
    def __init__(self, data: dict[str, Any]):
        self.cache_ttl_seconds: float = data.get("cache_ttl_seconds", 300)
        self.candidate_cap: int = data.get("candidate_cap", 100)
        self.nearby_candidate_limit: int = data.get("nearby_candidate_limit", 50)
        self.follow_batch_size: int = data.get("follow_batch_size", 10)
        self.follow_batch_cap: int = data.get("follow_batch_cap", 30)
        self.location_bucket_precision: int = data.get("location_bucket_precision", 2)
        self.hashtag_scan_limit: int = data.get("hashtag_scan_limit", 500)
        if self.cache_ttl_seconds <= 0:
            raise ConfigurationError("discovery.cache_ttl_seconds는 0보다 커야 합니다")
        if not 1 <= self.follow_batch_size <= 10:
            # Firestore 'in' 쿼리는 최대 10개 값
            raise ConfigurationError("discovery.follow_batch_size는 1~10 사이여야 합니다")


class FeedConfig:
    def __init__(self, data: dict[str, Any]):
        self.max_items: int = data.get("max_items", 100)
        self.default_timeframe: str = data.get("default_timeframe", "30d")


class WebConfig:
    def __init__(self, data: dict[str, Any]):
        self.host: str = data.get("host", "0.0.0.0")
        self.port: int = data.get("port", 8000)


def _venue_from_config(data: dict[str, Any]) -> Venue:
    try:
        return Venue(
            name=data["name"],
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            radius_meters=float(data.get("radius_meters", 100)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigurationError(f"잘못된 장소 설정: {data!r}") from e


class AppConfig:
    """YAML에서 로드된 전체 앱 설정."""

    def __init__(self, data: dict[str, Any]):
        self.name: str = data.get("app", {}).get("name", "Photo Discovery")

        self.discovery = DiscoveryConfig(data.get("discovery", {}))
        self.feed = FeedConfig(data.get("feed", {}))
        self.web = WebConfig(data.get("web", {}))

        # 목록 순서 = 반경이 겹칠 때의 우선순위
        self.venues: list[Venue] = [_venue_from_config(v) for v in data.get("venues", [])]


def load_app_config(path: str = "config/settings.yaml") -> AppConfig:
    """YAML 설정 파일을 로드하여 AppConfig를 반환."""
    config_path = Path(path)
    if not config_path.exists():
        return AppConfig({})
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(data)
