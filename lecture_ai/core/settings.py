from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    gemini_api_key: str | None = Field(default=None)
    gemini_model: str = Field(default="gemini-3.1-pro-preview")
    gemini_timeout_s: float = Field(default=60.0)

    # None: wait on the service for as long as the HTTP client allows.
    generation_timeout_s: float | None = Field(default=None)

    log_level: str = Field(default="INFO")

    @field_validator("generation_timeout_s", mode="before")
    @classmethod
    def _blank_timeout_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


settings = Settings()
