"""저장소 프로토콜 정의."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from trend_memo.domain import Status, UserId, UserTrendInfo
from trend_memo.models import RawTrendInfo


class SaveNewTrend(BaseModel):
    """새 사용자 트렌드 저장 요청."""

    model_config = ConfigDict(frozen=True)

    user_id: UserId = Field(description="사용자 ID")
    raw_trend: RawTrendInfo = Field(description="원본 트렌드")
    memo: str = Field(default="", description="초기 메모")
    status: Status = Field(default=Status.NEW, description="초기 상태")


class UserTrendRepository(Protocol):
    """사용자 트렌드 저장소 프로토콜.

    (user_id, link) 조합은 save에서 유일해야 한다.
    """

    async def save(self, request: SaveNewTrend) -> UserTrendInfo:
        """새 트렌드를 저장하고 저장된 결과를 반환한다.

        Raises:
            AlreadyExistsError: 같은 (user_id, link)가 이미 있는 경우
            ConvertError: 저장된 레코드를 복원할 수 없는 경우
        """
        ...

    async def update(self, trend: UserTrendInfo) -> UserTrendInfo:
        """메모와 상태를 갱신하고 입력을 그대로 반환한다.

        Raises:
            NotFoundError: ID에 해당하는 레코드가 없는 경우
        """
        ...

    async def list(self, user_id: UserId) -> list[UserTrendInfo]:
        """사용자의 트렌드를 모두 반환한다.

        Raises:
            ConvertError: 복원할 수 없는 레코드가 하나라도 있는 경우
        """
        ...
