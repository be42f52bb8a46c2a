import httpx
import pytest
from pydantic import SecretStr

from config import LlmRoute
from llm_gateway import UpstreamError, generate, generator, has_credentials


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeClient:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, *, json, headers, timeout):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _route(**overrides):
    values = dict(
        name="interview",
        base_url="https://example.test/v1beta/",
        model="gemini-test",
        timeout_s=5,
        api_key_env="TEST_GEMINI_KEY",
        api_key=SecretStr("secret"),
    )
    values.update(overrides)
    return LlmRoute(**values)


def _ok(*texts):
    return FakeResponse(payload={"candidates": [{"content": {"parts": [{"text": text} for text in texts]}}]})


def test_generate_posts_prompt_and_joins_parts():
    client = FakeClient(_ok("Hello ", "world"))
    route = _route(extra_headers={"X-Trace": "abc"})
    assert generate("Ask me something", cfg=route, client=client) == "Hello world"
    call = client.calls[0]
    assert call["url"] == "https://example.test/v1beta/models/gemini-test:generateContent"
    assert call["headers"]["x-goog-api-key"] == "secret"
    assert call["headers"]["X-Trace"] == "abc"
    assert call["json"]["contents"][0]["parts"][0]["text"] == "Ask me something"
    assert call["json"]["generationConfig"] == {"temperature": 0.7, "maxOutputTokens": 2048}
    assert call["timeout"] == 5


def test_error_status_raises_upstream_error():
    client = FakeClient(FakeResponse(status_code=429, payload={"error": "quota"}))
    with pytest.raises(UpstreamError):
        generate("prompt", cfg=_route(), client=client)


def test_transport_failure_raises_upstream_error():
    client = FakeClient(error=httpx.ConnectTimeout("timed out"))
    with pytest.raises(UpstreamError):
        generate("prompt", cfg=_route(), client=client)


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(payload=ValueError("not json")),
        FakeResponse(payload={"candidates": []}),
        FakeResponse(payload={"promptFeedback": {"blockReason": "SAFETY"}}),
    ],
)
def test_unusable_payload_raises_upstream_error(response):
    with pytest.raises(UpstreamError):
        generate("prompt", cfg=_route(), client=FakeClient(response))


def test_missing_credential_never_reaches_network(monkeypatch):
    monkeypatch.delenv("TEST_GEMINI_KEY", raising=False)
    client = FakeClient(_ok("unused"))
    route = _route(api_key=None)
    assert not has_credentials(route)
    with pytest.raises(UpstreamError):
        generate("prompt", cfg=route, client=client)
    assert client.calls == []


def test_credential_read_from_environment(monkeypatch):
    monkeypatch.setenv("TEST_GEMINI_KEY", "from-env")
    client = FakeClient(_ok("ok"))
    route = _route(api_key=None)
    assert has_credentials(route)
    assert generator(route, client)("prompt") == "ok"
    assert client.calls[0]["headers"]["x-goog-api-key"] == "from-env"


def test_sequential_route_still_returns_text():
    client = FakeClient(_ok("serial"))
    assert generate("prompt", cfg=_route(sequential=True), client=client) == "serial"
