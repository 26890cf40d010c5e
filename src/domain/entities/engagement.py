from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class EngagementKind(str, Enum):
    LIKE = "like"
    COMMENT = "comment"


@dataclass(frozen=True)
class EngagementEvent:
    """좋아요 또는 댓글 한 건."""

    target_id: str
    kind: EngagementKind
    occurred_at: datetime

    user_id: Optional[str] = None
