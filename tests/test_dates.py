"""날짜 유틸리티 테스트."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from trend_memo.dates import (
    RSS_DATE_FORMAT,
    date_from_str,
    format_date,
    now,
    parse_date,
)
from trend_memo.errors import InvalidDateError


class TestParseDate:
    """parse_date 테스트."""

    def test_parse_rss_pub_date(self) -> None:
        """RSS pubDate를 파싱한다."""
        parsed = parse_date("Sat, 22 Jun 2024 02:22:32 +0000", RSS_DATE_FORMAT)
        assert parsed == datetime(2024, 6, 22, 2, 22, 32, tzinfo=UTC)

    def test_keeps_offset(self) -> None:
        """타임존 오프셋을 유지한다."""
        parsed = parse_date("Fri, 21 Jun 2024 11:22:32 +0900", RSS_DATE_FORMAT)
        assert parsed.utcoffset() == timedelta(hours=9)
        assert parsed == datetime(2024, 6, 21, 2, 22, 32, tzinfo=UTC)

    def test_naive_format_becomes_utc(self) -> None:
        """타임존이 없는 포맷은 UTC로 간주한다."""
        parsed = parse_date("2021-01-01", "%Y-%m-%d")
        assert parsed == datetime(2021, 1, 1, tzinfo=UTC)

    @pytest.mark.parametrize("value", [None, "", "not a date", "2024-06-22"])
    def test_invalid_value_raises(self, value: str | None) -> None:
        """값이 없거나 포맷이 다르면 InvalidDateError가 발생한다."""
        with pytest.raises(InvalidDateError) as exc_info:
            parse_date(value, RSS_DATE_FORMAT)
        assert exc_info.value.value == (value or "")


class TestStorageFormat:
    """저장 포맷 테스트."""

    def test_format_and_restore(self) -> None:
        """format_date는 UTC로 기록하고 date_from_str로 같은 시각을 복원한다."""
        value = datetime(2024, 6, 21, 2, 22, 32, tzinfo=timezone(timedelta(hours=9)))
        text = format_date(value)
        assert text == "2024-06-20T17:22:32+0000"
        assert date_from_str(text) == value

    def test_accepts_colon_offset(self) -> None:
        """DB가 돌려주는 '+00:00' 형식도 읽는다."""
        assert date_from_str("2024-06-21T02:22:32+00:00") == datetime(
            2024, 6, 21, 2, 22, 32, tzinfo=UTC
        )

    def test_now_is_aware(self) -> None:
        """now()는 UTC 시각을 반환한다."""
        assert now().tzinfo is UTC
