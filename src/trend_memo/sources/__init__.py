"""데이터 소스 모듈."""

from trend_memo.sources.base import FeedSource, TrendCollector
from trend_memo.sources.rss import (
    RemoteRssTrendCollector,
    RssTrendCollector,
    collector_for,
    item_to_trend,
    parse_feed,
)

__all__ = [
    "FeedSource",
    "RemoteRssTrendCollector",
    "RssTrendCollector",
    "TrendCollector",
    "collector_for",
    "item_to_trend",
    "parse_feed",
]
