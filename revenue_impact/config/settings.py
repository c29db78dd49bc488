from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="REVENUE_IMPACT_",
        extra="ignore",
    )

    log_level: str = "INFO"
    decimal_places: int = 2
    exit_sentinel: str = "e"
    cors_origins: list[str] = ["http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
