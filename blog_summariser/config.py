from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class Settings(BaseSettings):
    """Centralised application configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gemini_api_key: Optional[str] = Field(
        default=None, validation_alias="GEMINI_API_KEY"
    )
    gemini_base_url: str = Field(
        default=GEMINI_API_BASE, validation_alias="GEMINI_BASE_URL"
    )
    gemini_model: str = Field(
        default="gemini-2.0-flash", validation_alias="GEMINI_MODEL"
    )
    gemini_fallback_model: str = Field(
        default="gemini-1.5-pro", validation_alias="GEMINI_FALLBACK_MODEL"
    )
    gemini_timeout_seconds: float = Field(
        default=10.0, gt=0, validation_alias="GEMINI_TIMEOUT_SECONDS"
    )
    gemini_retry_timeout_seconds: float = Field(
        default=15.0, gt=0, validation_alias="GEMINI_RETRY_TIMEOUT_SECONDS"
    )
    gemini_retry_backoff_seconds: float = Field(
        default=2.0, ge=0, validation_alias="GEMINI_RETRY_BACKOFF_SECONDS"
    )
    gemini_temperature: float = Field(
        default=0.2, ge=0, le=2, validation_alias="GEMINI_TEMPERATURE"
    )
    gemini_max_output_tokens: int = Field(
        default=800, gt=0, validation_alias="GEMINI_MAX_OUTPUT_TOKENS"
    )

    summary_sentence_count: int = Field(
        default=6, ge=1, validation_alias="SUMMARY_SENTENCE_COUNT"
    )
    summary_deadline_seconds: float = Field(
        default=30.0, gt=0, validation_alias="SUMMARY_DEADLINE_SECONDS"
    )

    environment: str = Field(default="local", validation_alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @model_validator(mode="after")
    def _check_models(self) -> "Settings":
        if self.gemini_api_key is not None and not self.gemini_api_key.strip():
            self.gemini_api_key = None
        if self.gemini_model == self.gemini_fallback_model:
            raise ValueError(
                "GEMINI_FALLBACK_MODEL must differ from GEMINI_MODEL"
            )
        return self

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
