"""Application settings and configuration management."""
from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    GOOGLE_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    LLM_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0)
    LLM_MAX_OUTPUT_TOKENS: int = Field(default=2048, ge=1)
    LLM_TIMEOUT_S: float = Field(default=30.0, ge=0.1)

    TOTAL_QUESTIONS: int = Field(default=5, ge=1)
    REQUIRE_API_KEY: bool = True

    CORS_ORIGINS: str = "*"
    PORT: int = 3003

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_assignment=True)

    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.CORS_ORIGINS.split(",") if item.strip()]


settings = Settings()
