from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEARCH_SERVER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Ranking
    max_result_document_count: int = Field(5, ge=1)
    relevance_epsilon: float = Field(1e-6, gt=0)

    # Request history: one slot per minute of a day
    request_window: int = Field(1440, ge=1)

    # CLI
    page_size: int = Field(2, ge=1)
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
