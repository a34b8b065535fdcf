"""CLI 엔트리포인트."""

import asyncio
import json
import logging
from enum import Enum
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from trend_memo.config import settings
from trend_memo.domain import UserId, UserTrendInfo
from trend_memo.models import CollectedTrends, Service
from trend_memo.sources import collector_for
from trend_memo.storage import SupabaseTrendRepository
from trend_memo.use_case import list_trends

console = Console()


class ServiceName(str, Enum):
    """수집 가능한 출처."""

    aws_updates = Service.AWS_UPDATES


app = typer.Typer(
    name="trend-memo",
    help="피드 트렌드를 수집하고 저장한 트렌드를 조회합니다.",
    no_args_is_help=True,
)


@app.callback()
def _configure(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="DEBUG 로그 출력"),
    ] = False,
) -> None:
    """로깅을 설정한다."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _render_collected(collected: CollectedTrends, limit: int) -> None:
    """수집 결과를 Rich 테이블로 렌더링한다."""
    if not collected.trends():
        console.print("[yellow]수집된 트렌드가 없습니다.[/yellow]")
        return

    latest = collected.latest()
    console.print()
    console.rule(f"[bold blue]{latest.service if latest else ''} 트렌드[/bold blue]")

    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("#", style="dim", width=3)
    table.add_column("제목", style="bold")
    table.add_column("게시 시각", width=26)

    for i, trend in enumerate(collected.trends()[:limit], 1):
        table.add_row(
            str(i),
            f"[link={trend.link}]{trend.title}[/link]",
            trend.created_at.isoformat(),
        )

    console.print(table)


def _render_user_trends(trends: list[UserTrendInfo]) -> None:
    """저장된 사용자 트렌드를 Rich 테이블로 렌더링한다."""
    if not trends:
        console.print("[yellow]저장된 트렌드가 없습니다.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("ID", style="dim", width=10)
    table.add_column("제목", style="bold")
    table.add_column("상태", justify="center", width=9)
    table.add_column("메모")

    for trend in trends:
        table.add_row(
            trend.id[:8],
            f"[link={trend.link}]{trend.title}[/link]",
            trend.status.value,
            trend.memo or "-",
        )

    console.print(table)


async def _collect(service: Service, quiet: bool = False) -> CollectedTrends:
    """한 번 수집을 실행한다."""
    if quiet:
        return await collector_for(service).collect()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"{service} 피드 수집 중...", total=None)
        collected = await collector_for(service).collect()
        progress.update(
            task,
            description=f"[green]✓[/green] 수집 완료: {len(collected)}개 트렌드",
        )
        progress.remove_task(task)
    return collected


@app.command()
def collect(
    service: Annotated[
        ServiceName,
        typer.Option("--service", "-s", help="수집할 출처"),
    ] = ServiceName.aws_updates,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", min=1, help="출력할 최대 개수"),
    ] = 20,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="JSON으로 출력"),
    ] = False,
) -> None:
    """피드에서 트렌드를 수집해 최신순으로 출력합니다."""
    try:
        collected = asyncio.run(
            _collect(Service.from_str(service.value), quiet=as_json)
        )
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except Exception as e:
        console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e

    if as_json:
        payload = [t.model_dump(by_alias=True) for t in collected.to_payload()[:limit]]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    _render_collected(collected, limit)


@app.command("list")
def list_command(
    user: Annotated[str, typer.Option("--user", "-u", help="사용자 ID")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="JSON으로 출력"),
    ] = False,
) -> None:
    """Supabase에 저장된 사용자 트렌드를 조회합니다."""
    repository = SupabaseTrendRepository(
        url=settings.supabase_url,
        key=settings.supabase_key,
        table=settings.supabase_table,
    )
    if not repository.is_configured:
        console.print("[yellow]Supabase가 설정되지 않았습니다.[/yellow]")
        raise typer.Exit(1)

    try:
        trends = asyncio.run(list_trends(repository, UserId(user)))
    except Exception as e:
        console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e

    if as_json:
        payload = [t.to_payload().model_dump(by_alias=True) for t in trends]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    _render_user_trends(trends)


if __name__ == "__main__":
    app()
