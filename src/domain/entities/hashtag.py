from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HashtagCount:
    """기간 내 해시태그 사용 횟수."""

    hashtag: str
    count: int
