"""`python -m workhours`: logging is configured before the server starts."""

import workhours.__main__ as entrypoint
from workhours.config import Settings


def test_main_configures_logging_then_runs_uvicorn(monkeypatch):
    calls = []
    settings = Settings(
        _env_file=None, server_addr="127.0.0.1:8123",
        log_level="INFO", log_format="text",
    )
    monkeypatch.setattr(entrypoint, "get_settings", lambda: settings)
    monkeypatch.setattr(
        entrypoint, "setup_logging",
        lambda level, fmt: calls.append(("setup_logging", level, fmt)),
    )
    monkeypatch.setattr(
        entrypoint.uvicorn, "run",
        lambda target, host, port: calls.append(("run", target, host, port)),
    )

    entrypoint.main()

    assert calls == [
        ("setup_logging", "INFO", "text"),
        ("run", "workhours.main:app", "127.0.0.1", 8123),
    ]
