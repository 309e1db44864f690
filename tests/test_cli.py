"""Tests for the command line entry point."""
import pytest

from cli import main as cli


def test_serve_defaults_come_from_settings():
    args = cli.build_parser().parse_args(["serve"])
    assert args.host == cli.settings.host
    assert args.port == cli.settings.port
    assert args.reload is False


def test_serve_runs_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

    cli.main(["serve", "--host", "0.0.0.0", "--port", "9000", "--log-level", "debug"])

    assert calls == [
        (
            "runtime.api.server:app",
            {"host": "0.0.0.0", "port": 9000, "reload": False, "log_level": "debug"},
        )
    ]


def test_show_config_masks_secret(capsys):
    cli.main(["show-config"])
    out = capsys.readouterr().out
    assert "session_cookie:" in out
    assert cli.settings.session_cookie in out
    assert "session_secret:  <" in out


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])
