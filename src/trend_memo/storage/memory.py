"""메모리 저장소 모듈."""

import asyncio
import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from trend_memo.dates import now
from trend_memo.domain import UserId, UserTrendInfo
from trend_memo.errors import AlreadyExistsError, NotFoundError
from trend_memo.storage.base import SaveNewTrend
from trend_memo.storage.records import (
    TrendRecord,
    convert_record,
    convert_records_strict,
    new_record,
    updated_record,
)

logger = logging.getLogger(__name__)


class InMemoryTrendRepository:
    """프로세스 메모리에 사용자 트렌드를 저장한다.

    모든 연산은 하나의 asyncio.Lock 안에서 실행된다.
    """

    def __init__(self, clock: Callable[[], datetime] = now) -> None:
        """
        Args:
            clock: 갱신 시각을 만들 함수
        """
        self.clock = clock
        self._records: list[TrendRecord] = []
        self._lock = asyncio.Lock()

    @property
    def records(self) -> tuple[TrendRecord, ...]:
        """저장된 레코드 스냅샷."""
        return tuple(self._records)

    async def insert_record(self, record: TrendRecord) -> None:
        """검증 없이 레코드를 넣는다 (다른 경로로 저장된 데이터 재현용)."""
        async with self._lock:
            self._records.append(record)

    async def save(self, request: SaveNewTrend) -> UserTrendInfo:
        """새 트렌드를 저장한다."""
        link = request.raw_trend.link
        async with self._lock:
            if any(
                r.user_id == request.user_id and r.link == link for r in self._records
            ):
                raise AlreadyExistsError(
                    f"Trend already saved: {request.user_id}/{link}"
                )
            record = new_record(request, uuid.uuid4().hex, self.clock())
            self._records.append(record)

        logger.info(f"Saved trend {record.id} for {record.user_id}")
        return convert_record(record)

    async def update(self, trend: UserTrendInfo) -> UserTrendInfo:
        """메모와 상태를 갱신한다."""
        async with self._lock:
            for i, record in enumerate(self._records):
                if record.id == trend.id:
                    self._records[i] = updated_record(record, trend, self.clock())
                    break
            else:
                raise NotFoundError(f"Trend not found: {trend.id}")

        logger.info(f"Updated trend {trend.id}: {trend.status.value}")
        return trend

    async def list(self, user_id: UserId) -> list[UserTrendInfo]:
        """사용자의 트렌드를 게시 시각 역순으로 반환한다."""
        async with self._lock:
            records = [r for r in self._records if r.user_id == user_id]
        records.sort(key=lambda r: r.created_at, reverse=True)
        return convert_records_strict(records)
