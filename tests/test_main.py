from __future__ import annotations

import pytest
from fastapi import FastAPI

from roster_server import __main__ as cli
from roster_server.config import Settings, parse_addr


@pytest.mark.parametrize(
    "addr,expected",
    [
        ("localhost:8080", ("localhost", 8080)),
        (":9000", ("0.0.0.0", 9000)),
        ("127.0.0.1:0", ("127.0.0.1", 0)),
        ("[::1]:8081", ("::1", 8081)),
    ],
)
def test_parse_addr(addr, expected):
    assert parse_addr(addr) == expected


@pytest.mark.parametrize("addr", ["localhost", "localhost:http", "localhost:70000"])
def test_parse_addr_rejects_malformed(addr):
    with pytest.raises(ValueError):
        parse_addr(addr)


def test_defaults():
    settings = cli.parse_settings([], defaults=Settings())

    assert settings == Settings(greeting="Hello", addr="localhost:8080", log_level="info")
    assert settings.host == "localhost"
    assert settings.port == 8080


def test_flags_override_defaults():
    settings = cli.parse_settings(["-g", "Halo", "-addr", ":9000", "--log-level", "DEBUG"], defaults=Settings())

    assert settings.greeting == "Halo"
    assert settings.addr == ":9000"
    assert settings.log_level == "debug"


def test_env_supplies_defaults(monkeypatch):
    monkeypatch.setenv("ROSTER_GREETING", "Selamat pagi")
    monkeypatch.setenv("ROSTER_ADDR", "0.0.0.0:8000")

    settings = cli.parse_settings([])

    assert settings.greeting == "Selamat pagi"
    assert settings.port == 8000


@pytest.mark.parametrize("argv", [["extra"], ["-addr", "nope"], ["--log-level", "loud"]])
def test_bad_usage_exits_with_status_2(argv):
    with pytest.raises(SystemExit) as exc_info:
        cli.parse_settings(argv, defaults=Settings())

    assert exc_info.value.code == 2


def test_main_runs_uvicorn_with_configured_app(monkeypatch):
    calls = {}

    def _run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", _run)
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)

    cli.main(["-g", "Hi", "-addr", "127.0.0.1:9001"])

    assert isinstance(calls["app"], FastAPI)
    assert calls["app"].state.settings.greeting == "Hi"
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9001
    assert calls["log_level"] == "info"
