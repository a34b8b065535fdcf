"""CLI 테스트."""

import json
from datetime import UTC, datetime

import pytest
from typer.testing import CliRunner

from trend_memo import main
from trend_memo.config import settings
from trend_memo.domain import Status, UserId, UserTrendInfo
from trend_memo.errors import FeedTransportError, QueryError
from trend_memo.models import CollectedTrends, RawTrendInfo, Service

runner = CliRunner()


class _FakeRepository:
    is_configured = True

    def __init__(self, result: list[UserTrendInfo] | Exception) -> None:
        self.result = result

    async def list(self, user_id: UserId) -> list[UserTrendInfo]:
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class _FakeCollector:
    def __init__(self, result: CollectedTrends | Exception) -> None:
        self.result = result

    async def collect(self) -> CollectedTrends:
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def collected() -> CollectedTrends:
    """테스트용 수집 결과를 반환한다."""
    return CollectedTrends(
        [
            RawTrendInfo(
                title=f"Item {day}",
                link=f"https://example.com/{day}",
                desc="",
                service=Service.aws_updates(),
                created_at=datetime(2024, 6, day, tzinfo=UTC),
            )
            for day in (1, 3, 2)
        ]
    )


class TestCollectCommand:
    """collect 명령 테스트."""

    def test_json_output(
        self, monkeypatch: pytest.MonkeyPatch, collected: CollectedTrends
    ) -> None:
        """--json은 최신순 Trend 목록을 출력한다."""
        monkeypatch.setattr(
            main, "collector_for", lambda service: _FakeCollector(collected)
        )

        result = runner.invoke(main.app, ["collect", "--json", "--limit", "2"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert [p["title"] for p in payload] == ["Item 3", "Item 2"]
        assert payload[0]["from"] == "aws_updates"

    def test_table_output(
        self, monkeypatch: pytest.MonkeyPatch, collected: CollectedTrends
    ) -> None:
        """기본 출력은 테이블이다."""
        monkeypatch.setattr(
            main, "collector_for", lambda service: _FakeCollector(collected)
        )

        result = runner.invoke(main.app, ["collect"])

        assert result.exit_code == 0
        assert "Item 3" in result.stdout

    def test_fetch_error_exits_with_1(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """수집 실패 시 종료 코드 1을 반환한다."""
        monkeypatch.setattr(
            main,
            "collector_for",
            lambda service: _FakeCollector(FeedTransportError("down")),
        )

        result = runner.invoke(main.app, ["collect", "--json"])

        assert result.exit_code == 1
        assert "down" in result.stdout


class TestListCommand:
    """list 명령 테스트."""

    def test_requires_supabase(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Supabase 설정이 없으면 종료 코드 1을 반환한다."""
        monkeypatch.setattr(settings, "supabase_url", None)
        monkeypatch.setattr(settings, "supabase_key", None)

        result = runner.invoke(main.app, ["list", "--user", "user"])

        assert result.exit_code == 1

    def test_json_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """--json은 UserTrend 목록을 출력한다."""
        trend = UserTrendInfo(
            "db-id",
            RawTrendInfo(
                title="Saved",
                link="https://example.com/saved",
                service=Service.aws_updates(),
                created_at=datetime(2024, 6, 1, tzinfo=UTC),
            ),
        )
        trend.change_status(Status.READING)
        monkeypatch.setattr(
            main,
            "SupabaseTrendRepository",
            lambda **kwargs: _FakeRepository([trend]),
        )

        result = runner.invoke(main.app, ["list", "--user", "user", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {
                "id": "db-id",
                "title": "Saved",
                "link": "https://example.com/saved",
                "desc": "",
                "from": "aws_updates",
                "memo": "",
                "status": "Reading",
                "created_at": "2024-06-01T00:00:00+0000",
            }
        ]

    def test_query_error_exits_with_1(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """조회 실패 시 종료 코드 1을 반환한다."""
        monkeypatch.setattr(
            main,
            "SupabaseTrendRepository",
            lambda **kwargs: _FakeRepository(QueryError("table missing")),
        )

        result = runner.invoke(main.app, ["list", "--user", "user"])

        assert result.exit_code == 1
        assert "table missing" in result.stdout
