"""사용자 트렌드 유스케이스.

수집 → 사용자가 새 트렌드를 확인 → 메모/상태를 붙여 저장 → 상태 갱신.
"""

from trend_memo.domain import UserId, UserTrendInfo
from trend_memo.storage.base import SaveNewTrend, UserTrendRepository


async def save_new_trend(
    repository: UserTrendRepository, request: SaveNewTrend
) -> UserTrendInfo:
    """새 사용자 트렌드를 저장한다."""
    return await repository.save(request)


async def update_trend(
    repository: UserTrendRepository, trend: UserTrendInfo
) -> UserTrendInfo:
    """사용자 트렌드의 메모/상태를 갱신한다."""
    return await repository.update(trend)


async def list_trends(
    repository: UserTrendRepository, user_id: UserId
) -> list[UserTrendInfo]:
    """사용자가 저장한 트렌드를 조회한다."""
    return await repository.list(user_id)
