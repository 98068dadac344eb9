"""Application Wiring — verifies lifespan banner and process entry point.

Invariants:
    - Lifespan prints the banner to stdout and configures logging once
    - Entry point runs uvicorn with the configured host and port
    - Routes are registered in banner order
    - Start and stop are logged with the listen address
    - A port already in use makes the entry point exit non-zero
"""

import logging
import socket

import pytest

from hello_service import __main__ as entry
from hello_service import main as main_module
from hello_service.core.banner import ENDPOINTS


async def test_lifespan_prints_banner(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(
        main_module, "setup_logging", lambda *args: calls.append(args),
    )

    async with main_module.lifespan(main_module.app):
        pass

    assert calls == [("INFO", "json")]
    assert capsys.readouterr().out.splitlines() == [
        "🚀 Server starting on http://0.0.0.0:8001",
        "📍 Endpoints:",
        "   GET /        - Welcome message",
        "   GET /health  - Health check",
        "   GET /api/info - Service information",
    ]


def test_routes_match_banner_order():
    served = [
        (method, route.path)
        for route in main_module.app.routes
        if route.path in {path for _, path, _ in ENDPOINTS}
        for method in sorted(route.methods)
    ]
    assert served == [(method, path) for method, path, _ in ENDPOINTS]


def test_entry_point_runs_uvicorn_with_settings(monkeypatch):
    captured = {}
    monkeypatch.setenv("HELLO_SERVICE_PORT", "9100")
    monkeypatch.setattr(
        entry.uvicorn, "run",
        lambda app, **kwargs: captured.update(app=app, **kwargs),
    )

    entry.main()

    assert captured["app"] == "hello_service.main:app"
    assert captured["host"] == "0.0.0.0"
    assert captured["port"] == 9100


async def test_lifespan_logs_start_and_stop(monkeypatch, caplog):
    monkeypatch.setattr(main_module, "setup_logging", lambda *args: None)
    caplog.set_level(logging.INFO, logger="hello_service.main")

    async with main_module.lifespan(main_module.app):
        pass

    started, stopping = [
        r for r in caplog.records if r.name == "hello_service.main"
    ]
    assert started.getMessage() == "rust-project 0.1.0 started"
    assert started.host == "0.0.0.0"
    assert started.port == 8001
    assert stopping.getMessage() == "rust-project shutting down"


def test_entry_point_exits_non_zero_when_port_is_taken(monkeypatch):
    monkeypatch.setattr(main_module, "setup_logging", lambda *args: None)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as held:
        held.bind(("127.0.0.1", 0))
        held.listen()
        monkeypatch.setenv("HELLO_SERVICE_HOST", "127.0.0.1")
        monkeypatch.setenv("HELLO_SERVICE_PORT", str(held.getsockname()[1]))

        with pytest.raises(SystemExit) as excinfo:
            entry.main()

    assert excinfo.value.code not in (0, None)
