"""사용자 트렌드 도메인 모델.

사용자가 원본 트렌드(RawTrendInfo)에 남기는 메모와 검토 상태를 다룬다.
UserTrendInfo는 change_memo / change_status 로만 변경된다.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import NewType

from trend_memo.dates import format_date
from trend_memo.errors import (
    InvalidStatusChangeError,
    InvalidStatusError,
    MemoTooLongError,
)
from trend_memo.models import RawTrendInfo, Service, UserTrend

logger = logging.getLogger(__name__)

UserId = NewType("UserId", str)
UserTrendInfoId = NewType("UserTrendInfoId", str)


class Status(str, Enum):
    """검토 상태."""

    NEW = "New"
    READING = "Reading"
    TODO = "ToDo"
    DONE = "Done"

    @classmethod
    def parse(cls, value: str) -> "Status":
        """저장된 문자열에서 Status를 복원한다.

        Raises:
            InvalidStatusError: 알 수 없는 값인 경우
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidStatusError(value) from e

    def change_to(self, target: "Status") -> "Status":
        """상태 전이 규칙을 적용한다.

        New는 진입 전용 상태다. 한 번 분류된 트렌드는 New로 되돌릴 수 없다.

        Raises:
            InvalidStatusChangeError: 다른 상태에서 New로 돌아가려는 경우
        """
        if self is target or self is Status.NEW:
            return target
        if target is Status.NEW:
            raise InvalidStatusChangeError(self, target)
        return target


class Memo:
    """길이 제한이 있는 메모. 길이는 문자 수 기준이다."""

    MAX_LEN = 500

    def __init__(self) -> None:
        self._value = ""

    @property
    def value(self) -> str:
        return self._value

    def change(self, new_memo: str) -> None:
        if len(new_memo) > self.MAX_LEN:
            raise MemoTooLongError(len(new_memo), self.MAX_LEN)
        self._value = new_memo

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Memo):
            return NotImplemented
        return self._value == other._value

    def __repr__(self) -> str:
        return f"Memo({self._value!r})"


class UserTrendInfo:
    """사용자가 주석을 단 트렌드."""

    def __init__(
        self,
        id: UserTrendInfoId | str,
        raw_info: RawTrendInfo,
    ) -> None:
        """
        Args:
            id: 저장소가 할당한 ID. 저장 전이면 빈 문자열.
            raw_info: 원본 트렌드
        """
        self._id = UserTrendInfoId(id)
        self._raw_info = raw_info
        self._memo = Memo()
        self._status = Status.NEW

    @property
    def id(self) -> UserTrendInfoId:
        return self._id

    @property
    def raw_info(self) -> RawTrendInfo:
        return self._raw_info

    @property
    def memo(self) -> str:
        return self._memo.value

    @property
    def status(self) -> Status:
        return self._status

    @property
    def title(self) -> str:
        return self._raw_info.title

    @property
    def link(self) -> str:
        return self._raw_info.link

    @property
    def desc(self) -> str:
        return self._raw_info.desc

    @property
    def service(self) -> Service:
        return self._raw_info.service

    @property
    def created_at(self) -> datetime:
        return self._raw_info.created_at

    def change_memo(self, new_memo: str) -> None:
        """메모를 변경한다.

        Raises:
            MemoTooLongError: 500자를 넘는 경우. 기존 메모는 유지된다.
        """
        self._memo.change(new_memo)

    def change_status(self, target: Status) -> None:
        """상태를 변경한다.

        Raises:
            InvalidStatusChangeError: 허용되지 않는 전이인 경우. 기존 상태는 유지된다.
        """
        self._status = self._status.change_to(target)
        logger.debug(f"Trend {self._id or '(unsaved)'} status: {self._status.value}")

    def to_payload(self) -> UserTrend:
        """JSON 직렬화용 UserTrend로 변환한다."""
        return UserTrend(
            id=self._id,
            title=self.title,
            link=self.link,
            desc=self.desc,
            service=str(self.service),
            memo=self.memo,
            status=self._status.value,
            created_at=format_date(self.created_at),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserTrendInfo):
            return NotImplemented
        return (
            self._id == other._id
            and self._raw_info == other._raw_info
            and self._memo == other._memo
            and self._status is other._status
        )

    def __repr__(self) -> str:
        return (
            f"UserTrendInfo(id={self._id!r}, link={self.link!r}, "
            f"status={self._status.value}, memo={self.memo!r})"
        )
