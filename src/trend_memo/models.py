"""데이터 모델 정의."""

from collections.abc import Iterable, Iterator
from typing import ClassVar

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from trend_memo.dates import format_date


class Service(BaseModel):
    """트렌드 출처 태그 ('aws_updates', 'x', ...)."""

    model_config = ConfigDict(frozen=True)

    AWS_UPDATES: ClassVar[str] = "aws_updates"
    X: ClassVar[str] = "x"

    name: str = Field(description="출처 이름")

    @classmethod
    def from_str(cls, value: str) -> "Service":
        """임의의 문자열로 Service를 만든다 (저장소 복원용)."""
        return cls(name=value)

    @classmethod
    def aws_updates(cls) -> "Service":
        return cls(name=cls.AWS_UPDATES)

    @classmethod
    def x(cls) -> "Service":
        return cls(name=cls.X)

    def __str__(self) -> str:
        return self.name


class RawTrendInfo(BaseModel):
    """피드에서 수집한 원본 트렌드 (사용자와 무관)."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="제목")
    link: str = Field(default="", description="링크 (출처 내 고유 식별자)")
    desc: str = Field(default="", description="설명")
    service: Service = Field(description="수집 출처")
    created_at: AwareDatetime = Field(description="게시 시각 (timezone 필수)")

    @property
    def key(self) -> tuple[Service, str]:
        """중복 판별용 식별자 (출처, 링크)."""
        return (self.service, self.link)


class FeedItem(BaseModel):
    """피드 파서가 돌려주는 아이템."""

    title: str | None = Field(default=None, description="제목")
    link: str | None = Field(default=None, description="링크")
    description: str | None = Field(default=None, description="설명")
    published: str | None = Field(default=None, description="게시 시각 원문")


class Trend(BaseModel):
    """JSON 출력용 트렌드."""

    title: str
    link: str
    desc: str
    service: str = Field(serialization_alias="from")
    created_at: str

    @classmethod
    def from_raw(cls, raw: RawTrendInfo) -> "Trend":
        return cls(
            title=raw.title,
            link=raw.link,
            desc=raw.desc,
            service=str(raw.service),
            created_at=format_date(raw.created_at),
        )


class UserTrend(BaseModel):
    """JSON 출력용 사용자 트렌드."""

    id: str
    title: str
    link: str
    desc: str
    service: str = Field(serialization_alias="from")
    memo: str
    status: str
    created_at: str


class CollectedTrends:
    """한 번의 수집 결과. 최신 항목이 먼저 오도록 정렬되어 있다."""

    def __init__(self, trends: Iterable[RawTrendInfo]) -> None:
        # sorted()는 안정 정렬이므로 같은 시각의 항목은 입력 순서를 유지한다
        self._trends: tuple[RawTrendInfo, ...] = tuple(
            sorted(trends, key=lambda t: t.created_at, reverse=True)
        )

    def latest(self) -> RawTrendInfo | None:
        """가장 최근 트렌드를 반환한다. 비어 있으면 None."""
        return self._trends[0] if self._trends else None

    def trends(self) -> tuple[RawTrendInfo, ...]:
        """정렬된 전체 트렌드를 반환한다."""
        return self._trends

    def to_payload(self) -> list[Trend]:
        """JSON 직렬화용 Trend 목록으로 변환한다."""
        return [Trend.from_raw(t) for t in self._trends]

    def __len__(self) -> int:
        return len(self._trends)

    def __iter__(self) -> Iterator[RawTrendInfo]:
        return iter(self._trends)

    def __repr__(self) -> str:
        return f"CollectedTrends({len(self._trends)} trends)"
