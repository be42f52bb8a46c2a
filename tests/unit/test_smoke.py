"""Basic smoke tests for the package layout."""

def test_imports():
    import agents.pipeline  # noqa: F401
    import api_server
    from config.settings import settings

    assert settings.TOTAL_QUESTIONS == 5
    assert api_server.app.title == "Interview Simulator API"
