"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    browser_type: str = "chromium"
    headless: bool = True
    navigation_timeout_ms: int = 60_000
    navigation_wait_until: str = "networkidle"

    log_level: str = "INFO"
    service_name: str = "scrape-service"


@lru_cache
def get_settings() -> Settings:
    return Settings()
