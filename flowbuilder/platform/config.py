from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments define upper-case names (``API_KEY``); matching
    # case-insensitively lets them populate the lower-case fields.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    api_key: str
    history_limit: int = Field(50, ge=1, description="Undo steps kept per flow.")
    burst_quiet_seconds: float = Field(
        1.0, ge=0, description="Inactivity that closes a typing burst."
    )
    suggestion_delay_seconds: float = Field(
        1.5, ge=0, description="Simulated latency of the suggestion provider."
    )
    node_id_prefix: str = "dndnode_"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
