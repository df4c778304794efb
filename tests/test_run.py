"""Tests for the process entry point."""

import pytest
from uvicorn import Server

import run


@pytest.mark.unit
def test_failed_startup_returns_startup_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    async def serve_without_starting(self, sockets=None) -> None:
        return None

    monkeypatch.setattr(Server, "serve", serve_without_starting)
    assert run.main() == run.STARTUP_FAILURE
    assert run.STARTUP_FAILURE != 0


@pytest.mark.unit
def test_graceful_shutdown_returns_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    async def serve_and_stop(self, sockets=None) -> None:
        self.started = True

    monkeypatch.setattr(Server, "serve", serve_and_stop)
    assert run.main() == 0
