"""저장 레코드와 도메인 객체 사이의 변환.

레코드의 status / created_at / updated_at 은 문자열로 저장된다.
문자열 인코딩은 이 모듈 밖으로 나가지 않는다.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from trend_memo.dates import date_from_str, format_date
from trend_memo.domain import Status, UserTrendInfo
from trend_memo.errors import ConvertError, InvalidDateError, TrendValidationError
from trend_memo.models import RawTrendInfo, Service
from trend_memo.storage.base import SaveNewTrend

logger = logging.getLogger(__name__)


class TrendRecord(BaseModel):
    """저장소에 기록되는 사용자 트렌드 레코드."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="레코드 ID")
    user_id: str = Field(description="사용자 ID")
    link: str = Field(default="", description="링크")
    title: str = Field(default="", description="제목")
    desc: str = Field(default="", description="설명")
    memo: str = Field(default="", description="메모")
    from_: str = Field(alias="from", description="출처 태그")
    status: str = Field(description="상태 문자열")
    created_at: str = Field(description="게시 시각 문자열")
    updated_at: str = Field(description="마지막 갱신 시각 문자열")

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: object) -> str:
        # DB에 따라 정수/UUID로 돌아온다
        return str(value)

    def to_row(self) -> dict[str, str]:
        """저장소에 넣을 dict로 변환한다."""
        return self.model_dump(by_alias=True)


def new_record(request: SaveNewTrend, record_id: str, updated_at: datetime) -> TrendRecord:
    """저장 요청으로 새 레코드를 만든다."""
    raw = request.raw_trend
    return TrendRecord(
        id=record_id,
        user_id=request.user_id,
        link=raw.link,
        title=raw.title,
        desc=raw.desc,
        memo=request.memo,
        from_=str(raw.service),
        status=request.status.value,
        created_at=format_date(raw.created_at),
        updated_at=format_date(updated_at),
    )


def record_from_row(row: dict[str, Any]) -> TrendRecord:
    """저장소에서 읽은 행을 TrendRecord로 만든다.

    Raises:
        ConvertError: 필수 컬럼이 없는 경우
    """
    try:
        return TrendRecord.model_validate(row)
    except ValidationError as e:
        raise ConvertError(f"Malformed record {row.get('id')}: {e}") from e


def update_fields(trend: UserTrendInfo, updated_at: datetime) -> dict[str, str]:
    """update가 덮어쓰는 컬럼."""
    return {
        "memo": trend.memo,
        "status": trend.status.value,
        "updated_at": format_date(updated_at),
    }


def updated_record(
    record: TrendRecord, trend: UserTrendInfo, updated_at: datetime
) -> TrendRecord:
    """메모/상태/갱신 시각만 바꾼 레코드를 반환한다."""
    return record.model_copy(update=update_fields(trend, updated_at))


def to_user_trend(record: TrendRecord) -> UserTrendInfo:
    """레코드를 UserTrendInfo로 복원한다.

    Raises:
        InvalidDateError: created_at을 해석할 수 없는 경우
        TrendValidationError: 상태 문자열이 잘못되었거나 메모가 너무 긴 경우
    """
    raw_info = RawTrendInfo(
        title=record.title,
        link=record.link,
        desc=record.desc,
        service=Service.from_str(record.from_),
        created_at=date_from_str(record.created_at),
    )
    trend = UserTrendInfo(record.id, raw_info)
    trend.change_memo(record.memo)
    # New에서 시작하므로 어떤 상태로든 전이할 수 있다
    trend.change_status(Status.parse(record.status))
    return trend


def convert_record(record: TrendRecord) -> UserTrendInfo:
    """to_user_trend의 실패를 ConvertError로 바꾼다."""
    try:
        return to_user_trend(record)
    except (InvalidDateError, TrendValidationError) as e:
        raise ConvertError(f"Failed to convert record {record.id}: {e}") from e


def convert_records(
    records: Iterable[TrendRecord],
) -> tuple[list[UserTrendInfo], list[ConvertError]]:
    """레코드를 각각 변환하고 성공/실패를 나눠서 반환한다."""
    trends: list[UserTrendInfo] = []
    failures: list[ConvertError] = []
    for record in records:
        try:
            trends.append(convert_record(record))
        except ConvertError as e:
            logger.warning(str(e))
            failures.append(e)
    return trends, failures


def convert_records_strict(records: Iterable[TrendRecord]) -> list[UserTrendInfo]:
    """레코드를 모두 변환한다. 하나라도 실패하면 ConvertError를 던진다."""
    trends, failures = convert_records(records)
    if failures:
        raise failures[0]
    return trends
