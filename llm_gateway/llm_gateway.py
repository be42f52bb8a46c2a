from __future__ import annotations  # Generative-language request gateway module

import logging
import os
import threading
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

import httpx

from config import LlmRoute


logger = logging.getLogger(__name__)  # Module logger setup


_MODEL_LOCKS: Dict[str, threading.Lock] = {}
_MODEL_LOCKS_GUARD = threading.Lock()


class HttpClient(Protocol):  # Minimal HTTP client protocol
    def post(self, url: str, *, json: Dict[str, Any], headers: Dict[str, str], timeout: float) -> "HttpResponse": ...


class HttpResponse(Protocol):  # Minimal HTTP response protocol
    @property
    def status_code(self) -> int: ...

    def json(self) -> Any: ...

    @property
    def text(self) -> str: ...


class UpstreamError(RuntimeError):  # Transport, authentication or quota failure
    pass


def _lock_for(cfg: LlmRoute) -> threading.Lock:
    key = cfg.name or cfg.url
    with _MODEL_LOCKS_GUARD:
        lock = _MODEL_LOCKS.get(key)
        if lock is None:
            lock = threading.Lock()
            _MODEL_LOCKS[key] = lock
    return lock


def api_key(cfg: LlmRoute) -> Optional[str]:  # Resolve the route credential, explicit value first
    if cfg.api_key is not None:
        value = cfg.api_key.get_secret_value().strip()
        if value:
            return value
    if not cfg.api_key_env:
        return None
    value = os.getenv(cfg.api_key_env, "").strip()
    return value or None


def _needs_key(cfg: LlmRoute) -> bool:
    return cfg.api_key is not None or cfg.api_key_env is not None


def has_credentials(cfg: LlmRoute) -> bool:  # Route is usable without a credential or has one set
    return not _needs_key(cfg) or api_key(cfg) is not None


def generate(
    prompt: str,
    *,
    cfg: LlmRoute,
    client: Optional[HttpClient] = None,
) -> str:  # Single model call returning raw text
    def _execute() -> str:
        headers = {"Content-Type": "application/json"}
        if _needs_key(cfg):
            key = api_key(cfg)
            if key is None:
                logger.error("LLM credential missing route=%s env=%s", cfg.name, cfg.api_key_env)
                raise UpstreamError(f"Credential {cfg.api_key_env or 'api_key'} is not configured")
            headers["x-goog-api-key"] = key
        headers.update(cfg.extra_headers)
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": cfg.temperature,
                "maxOutputTokens": cfg.max_output_tokens,
            },
        }
        preview = _preview(prompt)
        logger.info("LLM request send route=%s model=%s preview=%s", cfg.name, cfg.model, preview)
        try:
            response, close_cb = _post(cfg.url, payload, headers, cfg.timeout_s, client)
        except Exception as exc:  # noqa: BLE001
            logger.error("LLM transport failure: %s", exc)
            raise UpstreamError("LLM transport failed") from exc
        try:
            if response.status_code >= 400:
                logger.error("LLM error status: %s", response.status_code)
                raise UpstreamError(f"LLM returned status {response.status_code}")
            try:
                data = response.json()
            except Exception as exc:  # noqa: BLE001
                logger.error("Invalid JSON payload from LLM: %s", exc)
                raise UpstreamError("LLM payload was not JSON") from exc
            text = _extract_text(data)
        finally:
            _close_safely(close_cb)
        logger.info("LLM request done route=%s model=%s chars=%d", cfg.name, cfg.model, len(text))
        return text

    if cfg.sequential:
        lock = _lock_for(cfg)
        with lock:
            return _execute()
    return _execute()


def generator(cfg: LlmRoute, client: Optional[HttpClient] = None) -> Callable[[str], str]:  # Bind a route into a prompt -> text callable
    def _generate(prompt: str) -> str:
        return generate(prompt, cfg=cfg, client=client)

    return _generate


def _post(url: str, payload: Dict[str, Any], headers: Dict[str, str], timeout: float, client: Optional[HttpClient]) -> Tuple[HttpResponse, Optional[Callable[[], None]]]:  # Dispatch HTTP request
    if client is not None:
        response = client.post(url, json=payload, headers=headers, timeout=timeout)
        return response, None
    http_client = httpx.Client(timeout=timeout)
    try:
        response = http_client.post(url, json=payload, headers=headers)
    except Exception:
        http_client.close()
        raise
    return response, http_client.close


def _close_safely(close_cb: Optional[Callable[[], None]]) -> None:  # Close HTTP client callback when provided
    if close_cb is not None:
        close_cb()


def _preview(prompt: str) -> str:  # Build preview string for logging
    for line in prompt.splitlines():
        text = line.strip()
        if text:
            return text if len(text) <= 120 else text[:117] + "..."
    return ""


def _extract_text(data: Any) -> str:  # Extract candidate text from a generateContent response
    if isinstance(data, dict):
        candidates = data.get("candidates")
        if isinstance(candidates, list) and candidates:
            first = candidates[0] if isinstance(candidates[0], dict) else {}
            content = first.get("content") if isinstance(first.get("content"), dict) else {}
            parts = content.get("parts")
            if isinstance(parts, list):
                texts = [part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)]
                if texts:
                    return "".join(texts)
        feedback = data.get("promptFeedback")
        if isinstance(feedback, dict) and feedback.get("blockReason"):
            raise UpstreamError(f"LLM blocked prompt: {feedback['blockReason']}")
    raise UpstreamError("LLM response missing content")
