from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Venue:
    """이름이 붙은 고정 반경 장소 (정적 참조 데이터)."""

    name: str
    latitude: float
    longitude: float
    radius_meters: float
