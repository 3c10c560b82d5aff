from functools import lru_cache
from typing import Dict

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class SourceUrls(BaseModel):
    """List URL and post/query URL of one notice board."""

    base_url: str = ""
    query_url: str = ""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Environment
    environment: str = "development"  # "development" or "production"
    timezone: str = "Asia/Seoul"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/notices.db"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    debug: bool = False

    # Crawler
    crawler_timeout: float = 10.0

    # Scheduler (overlapping firings of the same job are allowed)
    scheduler_max_instances: int = 3

    # Notifications (FCM HTTP v1)
    fcm_project_id: str = ""
    fcm_access_token: str = ""
    notification_enabled: bool = True

    # Admin
    admin_api_key: str = ""

    # Notice sources, JSON in env: {"CSE": {"base_url": "...", "query_url": "..."}}
    wholes: Dict[str, SourceUrls] = {}
    majors: Dict[str, SourceUrls] = {}
    major_styles: Dict[str, SourceUrls] = {}
    oceanography_styles: Dict[str, SourceUrls] = {}
    library_styles: Dict[str, SourceUrls] = {}
    inha_design_styles: Dict[str, SourceUrls] = {}

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
