"""RSS 소스 모듈."""

import logging

import feedparser
import httpx

from trend_memo.config import settings
from trend_memo.dates import RSS_DATE_FORMAT, parse_date
from trend_memo.errors import FeedParseError, FeedTransportError, InvalidDateError
from trend_memo.models import CollectedTrends, FeedItem, RawTrendInfo, Service

logger = logging.getLogger(__name__)


def parse_feed(content: bytes) -> list[FeedItem]:
    """피드 문서를 파싱한다.

    Args:
        content: RSS/Atom 문서 원문

    Returns:
        문서 순서대로의 FeedItem 리스트

    Raises:
        FeedParseError: 문서가 깨져 있고 아이템도 얻을 수 없는 경우
    """
    parsed = feedparser.parse(content)

    # feedparser는 관대하므로 아이템을 하나도 못 건졌을 때만 실패로 본다
    if parsed.bozo and not parsed.entries:
        raise FeedParseError(f"Failed to parse feed: {parsed.bozo_exception}")

    return [
        FeedItem(
            title=entry.get("title"),
            link=entry.get("link"),
            description=entry.get("description"),
            published=entry.get("published"),
        )
        for entry in parsed.entries
    ]


def item_to_trend(item: FeedItem, service: Service) -> RawTrendInfo:
    """FeedItem을 RawTrendInfo로 변환한다.

    제목/링크/설명이 없으면 빈 문자열을 쓴다.

    Raises:
        InvalidDateError: 게시 시각이 없거나 해석할 수 없는 경우
    """
    return RawTrendInfo(
        title=item.title or "",
        link=item.link or "",
        desc=item.description or "",
        service=service,
        created_at=parse_date(item.published, RSS_DATE_FORMAT),
    )


class RssTrendCollector:
    """이미 받아 둔 RSS 문서에서 트렌드를 수집한다."""

    def __init__(self, service: Service, content: bytes) -> None:
        """
        Args:
            service: 수집 대상 출처 태그
            content: RSS 문서 원문
        """
        self.service = service
        self.content = content

    async def collect(self) -> CollectedTrends:
        """문서의 아이템을 트렌드로 변환한다. 날짜가 잘못된 아이템은 건너뛴다."""
        items = parse_feed(self.content)

        trends: list[RawTrendInfo] = []
        for item in items:
            try:
                trends.append(item_to_trend(item, self.service))
            except InvalidDateError as e:
                logger.debug(f"Skip item {item.link or item.title!r}: {e}")

        logger.info(f"Collected {len(trends)}/{len(items)} items from {self.service}")
        return CollectedTrends(trends)


class RemoteRssTrendCollector:
    """원격 RSS 피드를 받아 트렌드를 수집한다."""

    def __init__(
        self,
        url: str,
        service: Service,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            url: 피드 URL
            service: 수집 대상 출처 태그
            timeout: HTTP 요청 타임아웃 (초). None이면 설정값 사용.
            transport: httpx 트랜스포트 (테스트용)
        """
        self.url = url
        self.service = service
        self.timeout = timeout or settings.feed_timeout
        self.transport = transport

    @classmethod
    def aws_updates(
        cls,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "RemoteRssTrendCollector":
        """AWS What's New 피드 수집기를 만든다."""
        return cls(
            settings.aws_updates_feed_url,
            Service.aws_updates(),
            timeout=timeout,
            transport=transport,
        )

    async def fetch(self) -> bytes:
        """피드 원문을 가져온다.

        Raises:
            FeedTransportError: 요청 실패 또는 2xx 이외의 응답
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch feed {self.url}: {e}")
            raise FeedTransportError(f"Failed to fetch {self.url}: {e}") from e

        return response.content

    async def collect(self) -> CollectedTrends:
        """피드를 받아 트렌드를 수집한다."""
        content = await self.fetch()
        return await RssTrendCollector(self.service, content).collect()


def collector_for(
    service: Service,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RemoteRssTrendCollector:
    """알려진 출처의 수집기를 반환한다.

    Raises:
        ValueError: 피드가 등록되지 않은 출처인 경우
    """
    if service == Service.aws_updates():
        return RemoteRssTrendCollector.aws_updates(timeout=timeout, transport=transport)
    raise ValueError(f"No feed registered for service: {service}")
