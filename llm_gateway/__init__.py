from __future__ import annotations  # Re-export llm_gateway public API

from .llm_gateway import HttpClient, HttpResponse, UpstreamError, api_key, generate, generator, has_credentials

__all__ = ["HttpClient", "HttpResponse", "UpstreamError", "api_key", "generate", "generator", "has_credentials"]
