import pytest

from config import DOMAINS, ROLES, route_from_settings
from config.registry import GENERATE_KEY, bind_model, get_model, is_bound
from config.settings import Settings


def test_settings_defaults(monkeypatch):
    for name in ("GOOGLE_API_KEY", "GEMINI_MODEL", "TOTAL_QUESTIONS", "PORT", "CORS_ORIGINS", "REQUIRE_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.GOOGLE_API_KEY is None
    assert settings.GEMINI_MODEL == "gemini-2.0-flash"
    assert settings.TOTAL_QUESTIONS == 5
    assert settings.PORT == 3003
    assert settings.REQUIRE_API_KEY is True
    assert settings.cors_origins() == ["*"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "k")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    settings = Settings(_env_file=None)
    route = route_from_settings(settings)
    assert route.api_key.get_secret_value() == "k"
    assert route.url.endswith("/models/gemini-2.0-flash:generateContent")
    assert settings.cors_origins() == ["http://a.test", "http://b.test"]


def test_registry_bind_and_retrieve():
    marker = object()
    bind_model(GENERATE_KEY, lambda prompt: marker)
    assert is_bound(GENERATE_KEY)
    assert get_model(GENERATE_KEY)("anything") is marker


def test_registry_unknown_key():
    with pytest.raises(KeyError):
        get_model("models.unknown")


def test_catalogs_are_populated():
    assert "Software Engineer" in ROLES
    assert len(set(DOMAINS)) == len(DOMAINS) == 15
