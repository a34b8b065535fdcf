"""유스케이스 테스트."""

from datetime import UTC, datetime

import pytest

from trend_memo.domain import Status, UserId
from trend_memo.errors import AlreadyExistsError
from trend_memo.models import RawTrendInfo, Service
from trend_memo.storage.base import SaveNewTrend
from trend_memo.storage.memory import InMemoryTrendRepository
from trend_memo.use_case import list_trends, save_new_trend, update_trend


@pytest.fixture
def save_request() -> SaveNewTrend:
    """메모와 상태를 붙인 저장 요청을 반환한다."""
    raw_trend = RawTrendInfo(
        title="title",
        link="link",
        desc="desc",
        service=Service.aws_updates(),
        created_at=datetime(2021, 1, 1, tzinfo=UTC),
    )
    return SaveNewTrend(
        user_id=UserId("user_id"),
        raw_trend=raw_trend,
        memo="so, interesting!",
        status=Status.TODO,
    )


class TestUseCase:
    """save_new_trend / update_trend / list_trends 테스트."""

    @pytest.mark.asyncio
    async def test_user_can_save_new_trend_with_other_info(
        self, save_request: SaveNewTrend
    ) -> None:
        """메모와 상태를 붙여 저장할 수 있다."""
        repository = InMemoryTrendRepository()

        user_trend = await save_new_trend(repository, save_request)

        assert user_trend.title == "title"
        assert user_trend.link == "link"
        assert user_trend.memo == "so, interesting!"
        assert user_trend.status is Status.TODO

    @pytest.mark.asyncio
    async def test_user_can_update_trend(self, save_request: SaveNewTrend) -> None:
        """저장한 트렌드의 상태를 바꿀 수 있다."""
        repository = InMemoryTrendRepository()

        user_trend = await save_new_trend(repository, save_request)
        user_trend.change_status(Status.DONE)
        user_trend = await update_trend(repository, user_trend)

        assert user_trend.status is Status.DONE
        [stored] = await list_trends(repository, UserId("user_id"))
        assert stored.status is Status.DONE

    @pytest.mark.asyncio
    async def test_errors_propagate(self, save_request: SaveNewTrend) -> None:
        """저장소 오류를 그대로 전달한다."""
        repository = InMemoryTrendRepository()
        await save_new_trend(repository, save_request)

        with pytest.raises(AlreadyExistsError):
            await save_new_trend(repository, save_request)
