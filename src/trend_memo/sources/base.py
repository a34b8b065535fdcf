"""소스 프로토콜 정의."""

from typing import Protocol

from trend_memo.models import CollectedTrends


class FeedSource(Protocol):
    """피드 원문을 가져오는 프로토콜."""

    async def fetch(self) -> bytes:
        """피드 원문을 가져온다."""
        ...


class TrendCollector(Protocol):
    """트렌드 수집 프로토콜."""

    async def collect(self) -> CollectedTrends:
        """트렌드를 수집한다."""
        ...
