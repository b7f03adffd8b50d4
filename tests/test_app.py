"""App wiring and settings tests."""

import logging
from contextlib import contextmanager
from unittest.mock import patch

from fastapi.testclient import TestClient

from src.config import DEFAULT_ARTICLE_SELECTORS, Settings
from src.digest.pipeline import ArticlePipeline
from src.logging_config import setup_logging
from src.main import app


def test_health():
    client = TestClient(app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@patch("src.main.setup_logging")
def test_lifespan_builds_pipeline(mock_setup_logging):
    with TestClient(app) as client:
        assert isinstance(client.app.state.pipeline, ArticlePipeline)
    mock_setup_logging.assert_called_once()


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("ARTICLE_SELECTORS", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LLM_PROVIDER", raising=False)
    monkeypatch.delenv("LLM_MODEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.article_selectors == DEFAULT_ARTICLE_SELECTORS
    assert settings.port == 3001
    assert settings.llm_model_name == "google-gla:gemini-2.0-flash-001"
    assert settings.fetch_timeout_seconds > 0
    assert settings.generation_timeout_seconds > 0


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ARTICLE_SELECTORS", '["article .body p", "main p"]')
    monkeypatch.setenv("LLM_PROVIDER", "openai")
    monkeypatch.setenv("LLM_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "3.5")
    settings = Settings(_env_file=None)
    assert settings.article_selectors == ["article .body p", "main p"]
    assert settings.llm_model_name == "openai:gpt-4o-mini"
    assert settings.fetch_timeout_seconds == 3.5


_TOUCHED_LOGGERS = ("", "uvicorn", "uvicorn.access", "uvicorn.error", "httpx")


def _logger_state() -> dict:
    state = {}
    for name in _TOUCHED_LOGGERS:
        lg = logging.getLogger(name)
        state[name] = (lg.handlers[:], lg.level, lg.propagate)
    return state


@contextmanager
def _preserved_logging():
    """Put back handlers, levels and propagation of every logger setup_logging touches."""
    saved = _logger_state()
    try:
        yield
    finally:
        for name, (handlers, level, propagate) in saved.items():
            lg = logging.getLogger(name)
            lg.handlers[:] = handlers
            lg.setLevel(level)
            lg.propagate = propagate


def test_setup_logging_sets_level_and_quiets_httpx():
    root = logging.getLogger()
    with _preserved_logging():
        setup_logging("warning")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").propagate is False


def test_setup_logging_state_is_restored_after_test():
    before = _logger_state()
    with _preserved_logging():
        setup_logging("error")
    assert _logger_state() == before
