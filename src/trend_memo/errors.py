"""예외 정의."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trend_memo.domain import Status


class TrendMemoError(Exception):
    """trend-memo 최상위 예외."""


class TrendValidationError(TrendMemoError):
    """도메인 값 검증 실패."""


class MemoTooLongError(TrendValidationError):
    """메모가 최대 길이를 넘었다."""

    def __init__(self, length: int, max_len: int) -> None:
        self.length = length
        self.max_len = max_len
        super().__init__(f"Memo is too long: {length} > {max_len}")


class InvalidStatusChangeError(TrendValidationError):
    """허용되지 않는 상태 전이."""

    def __init__(self, current: Status, target: Status) -> None:
        self.current = current
        self.target = target
        super().__init__(
            f"Invalid status change: {current.value} -> {target.value}"
        )


class InvalidStatusError(TrendValidationError):
    """알 수 없는 상태 문자열."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid status: {value!r}")


class InvalidDateError(TrendMemoError):
    """날짜 문자열을 해석할 수 없다."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


class FetchError(TrendMemoError):
    """피드 수집 실패."""


class FeedTransportError(FetchError):
    """피드를 가져오는 중 네트워크/HTTP 오류가 발생했다."""


class FeedParseError(FetchError):
    """피드 문서가 올바르지 않다."""


class RepositoryError(TrendMemoError):
    """저장소 오류."""


class SaveError(RepositoryError):
    """저장 실패."""


class AlreadyExistsError(RepositoryError):
    """같은 (user_id, link) 레코드가 이미 있다."""


class NotFoundError(RepositoryError):
    """레코드를 찾을 수 없다."""


class ConvertError(RepositoryError):
    """저장된 레코드를 도메인 객체로 변환할 수 없다."""


class QueryError(RepositoryError):
    """조회 실패."""
