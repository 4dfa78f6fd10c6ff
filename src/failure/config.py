from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    max_depth: int = Field(default=1024, ge=1)
    stack_limit: int | None = Field(default=None, ge=1)

    @field_validator("stack_limit", mode="before")
    @classmethod
    def _parse_stack_limit(cls, v: int | str | None) -> int | str | None:
        if v == "":
            return None
        return v

    model_config = SettingsConfigDict(env_prefix="FAILURE_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
