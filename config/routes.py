"""Model endpoint configuration."""
from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field, SecretStr

from .settings import Settings


class LlmRoute(BaseModel):
    """Generative-language endpoint configuration."""

    name: str
    base_url: str
    model: str
    timeout_s: float = Field(ge=0.1)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_output_tokens: int = Field(default=2048, ge=1)
    api_key_env: str | None = None
    api_key: SecretStr | None = None
    extra_headers: Dict[str, str] = Field(default_factory=dict)
    sequential: bool = False

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


def route_from_settings(cfg: Settings) -> LlmRoute:
    """Build the interview model route from application settings."""

    return LlmRoute(
        name="interview",
        base_url=cfg.GEMINI_BASE_URL,
        model=cfg.GEMINI_MODEL,
        timeout_s=cfg.LLM_TIMEOUT_S,
        temperature=cfg.LLM_TEMPERATURE,
        max_output_tokens=cfg.LLM_MAX_OUTPUT_TOKENS,
        api_key_env="GOOGLE_API_KEY",
        api_key=SecretStr(cfg.GOOGLE_API_KEY) if cfg.GOOGLE_API_KEY else None,
    )
