"""설정 관리 모듈."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    aws_updates_feed_url: str = Field(
        default="https://aws.amazon.com/jp/about-aws/whats-new/recent/feed/",
        description="AWS What's New RSS 피드 URL",
    )
    feed_timeout: float = Field(
        default=10.0,
        gt=0,
        description="피드 요청 타임아웃 (초)",
    )

    # Supabase
    supabase_url: str | None = Field(default=None, description="Supabase URL")
    supabase_key: str | None = Field(default=None, description="Supabase anon key")
    supabase_table: str = Field(
        default="user_trends",
        description="사용자 트렌드를 저장할 테이블",
    )

    log_level: str = Field(default="INFO", description="로그 레벨")


settings = Settings()
