"""Supabase 스토리지 모듈."""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from supabase import Client, PostgrestAPIError, create_client

from trend_memo.dates import now
from trend_memo.domain import UserId, UserTrendInfo
from trend_memo.errors import (
    AlreadyExistsError,
    NotFoundError,
    QueryError,
    SaveError,
)
from trend_memo.storage.base import SaveNewTrend
from trend_memo.storage.records import (
    convert_record,
    convert_records_strict,
    new_record,
    record_from_row,
    update_fields,
)

logger = logging.getLogger(__name__)

# PostgreSQL unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseTrendRepository:
    """Supabase 테이블에 사용자 트렌드를 저장한다.

    테이블에는 (user_id, link) unique 제약이 있어야 한다.
    동시에 들어온 save 사이의 경합은 이 제약으로 막는다.
    """

    def __init__(
        self,
        url: str | None,
        key: str | None,
        table: str = "user_trends",
        clock: Callable[[], datetime] = now,
    ) -> None:
        """
        Args:
            url: Supabase 프로젝트 URL
            key: Supabase anon key
            table: 테이블 이름
            clock: 갱신 시각을 만들 함수
        """
        self.client: Client | None = None
        if url and key:
            self.client = create_client(url, key)
        self.table = table
        self.clock = clock

    @property
    def is_configured(self) -> bool:
        """Supabase가 설정되었는지 확인한다."""
        return self.client is not None

    def _require_client(self) -> Client:
        if self.client is None:
            raise SaveError("Supabase is not configured")
        return self.client

    async def save(self, request: SaveNewTrend) -> UserTrendInfo:
        """새 트렌드를 저장한다."""
        client = self._require_client()
        link = request.raw_trend.link

        # 기존 레코드 확인
        try:
            existing = (
                client.table(self.table)
                .select("id")
                .eq("user_id", request.user_id)
                .eq("link", link)
                .execute()
            )
        except PostgrestAPIError as e:
            raise SaveError(f"Failed to check existing trend: {e.message}") from e
        if existing.data:
            raise AlreadyExistsError(f"Trend already saved: {request.user_id}/{link}")

        record = new_record(request, uuid.uuid4().hex, self.clock())
        try:
            response = client.table(self.table).insert(record.to_row()).execute()
        except PostgrestAPIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise AlreadyExistsError(
                    f"Trend already saved: {request.user_id}/{link}"
                ) from e
            raise SaveError(f"Failed to save trend: {e.message}") from e

        if response.data:
            record = record_from_row(response.data[0])
        logger.info(f"Saved trend {record.id} for {record.user_id}")
        return convert_record(record)

    async def update(self, trend: UserTrendInfo) -> UserTrendInfo:
        """메모와 상태를 갱신한다."""
        client = self._require_client()

        data = update_fields(trend, self.clock())
        try:
            response = (
                client.table(self.table).update(data).eq("id", trend.id).execute()
            )
        except PostgrestAPIError as e:
            raise SaveError(f"Failed to update trend {trend.id}: {e.message}") from e

        if not response.data:
            raise NotFoundError(f"Trend not found: {trend.id}")

        logger.info(f"Updated trend {trend.id}: {trend.status.value}")
        return trend

    async def list(self, user_id: UserId) -> list[UserTrendInfo]:
        """사용자의 트렌드를 게시 시각 역순으로 반환한다."""
        client = self._require_client()

        # created_at은 UTC로 기록되므로 문자열 정렬이 시간 순서와 같다
        try:
            response = (
                client.table(self.table)
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .execute()
            )
        except PostgrestAPIError as e:
            raise QueryError(
                f"Failed to list trends for {user_id}: {e.message}"
            ) from e
        records = [record_from_row(row) for row in response.data or []]
        return convert_records_strict(records)
