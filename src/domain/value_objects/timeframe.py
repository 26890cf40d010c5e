"""발견 기간 토큰 (1h, 24h, 7d, 30d)."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from enum import Enum

logger = logging.getLogger(__name__)


class Timeframe(str, Enum):
    HOUR = "1h"
    DAY = "24h"
    WEEK = "7d"
    MONTH = "30d"

    @property
    def window(self) -> timedelta:
        return _WINDOWS[self]

    def boundary(self, now: datetime) -> datetime:
        """이 기간에 포함되는 가장 이른 생성 시각."""
        return now - self.window


_WINDOWS = {
    Timeframe.HOUR: timedelta(hours=1),
    Timeframe.DAY: timedelta(hours=24),
    Timeframe.WEEK: timedelta(days=7),
    Timeframe.MONTH: timedelta(days=30),
}

DEFAULT_TIMEFRAME = Timeframe.DAY


def resolve_timeframe(token: str | Timeframe | None) -> Timeframe:
    """토큰을 Timeframe으로 변환. 알 수 없는 토큰은 24h로 대체한다 (오류 아님)."""
    if isinstance(token, Timeframe):
        return token
    try:
        return Timeframe(token)
    except ValueError:
        logger.warning(f"알 수 없는 기간 토큰 '{token}' — {DEFAULT_TIMEFRAME.value}로 대체")
        return DEFAULT_TIMEFRAME
