"""날짜 파싱/포맷 유틸리티."""

from datetime import UTC, datetime

from trend_memo.errors import InvalidDateError

# RSS 2.0 pubDate (RFC 822)
RSS_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"
# 저장소 레코드에 기록하는 포맷
STORAGE_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def now() -> datetime:
    """현재 시각을 UTC로 반환한다."""
    return datetime.now(UTC).replace(microsecond=0)


def parse_date(value: str | None, fmt: str) -> datetime:
    """문자열을 주어진 포맷으로 파싱한다.

    Args:
        value: 날짜 문자열
        fmt: strptime 포맷

    Returns:
        timezone 정보가 있는 datetime

    Raises:
        InvalidDateError: 값이 없거나 포맷과 맞지 않는 경우
    """
    if not value:
        raise InvalidDateError(value or "")
    try:
        parsed = datetime.strptime(value.strip(), fmt)
    except ValueError as e:
        raise InvalidDateError(value) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_date(value: datetime) -> str:
    """datetime을 UTC 기준 저장소 포맷 문자열로 변환한다.

    모든 값이 +0000 으로 기록되므로 문자열 순서가 시간 순서와 같다.
    """
    return value.astimezone(UTC).strftime(STORAGE_DATE_FORMAT)


def date_from_str(value: str | None) -> datetime:
    """저장소 포맷 문자열을 datetime으로 복원한다."""
    return parse_date(value, STORAGE_DATE_FORMAT)
