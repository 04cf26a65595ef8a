"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str | None = None
    supabase_service_key: str | None = None
    default_daily_calorie_goal: int = Field(default=2000, gt=0)
    tick_interval_seconds: float = Field(default=1.0, gt=0)
    seed_default_goals: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def uses_supabase(self) -> bool:
        """Return True when both Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_service_key)
