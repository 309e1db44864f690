"""Unit tests for environment-driven settings."""
import logging

from configs.settings import DEFAULT_SESSION_SECRET, Settings


def test_defaults(monkeypatch):
    for name in (
        "TODO_SESSION_SECRET",
        "TODO_SESSION_COOKIE",
        "TODO_SESSION_MAX_AGE",
        "TODO_HOST",
        "TODO_PORT",
        "TODO_LOG_LEVEL",
        "TODO_TEMPLATES_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.session_cookie == "todo_session"
    assert s.session_max_age == 1209600
    assert s.host == "127.0.0.1"
    assert s.port == 8000
    assert s.log_level == "INFO"
    assert s.templates_dir.name == "templates"
    assert (s.templates_dir / "layout.html").is_file()


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TODO_SESSION_SECRET", "s3cret")
    monkeypatch.setenv("TODO_PORT", "9001")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_TEMPLATES_DIR", str(tmp_path))

    s = Settings()
    assert s.session_secret == "s3cret"
    assert s.port == 9001
    assert s.log_level == "DEBUG"
    assert s.templates_dir == tmp_path


def test_default_secret_logs_warning(monkeypatch, caplog):
    monkeypatch.delenv("TODO_SESSION_SECRET", raising=False)

    with caplog.at_level(logging.WARNING, logger="configs.settings"):
        assert Settings().session_secret == DEFAULT_SESSION_SECRET
    assert "TODO_SESSION_SECRET" in caplog.text
