"""Shared fixtures for the guestbook test suite."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from guestbook.app.core.storage import FileMessageStore
from guestbook.app.main import create_app


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    """Location of a message log that does not exist yet."""
    return tmp_path / "data" / "messages.txt"


@pytest.fixture
def store(log_path: Path) -> FileMessageStore:
    """File-backed store over an empty temporary log."""
    return FileMessageStore(log_path)


@pytest.fixture
def test_app(store: FileMessageStore) -> FastAPI:
    """Application wired to the temporary store."""
    return create_app(store=store)


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    """Create a TestClient for the test app."""
    return TestClient(test_app)
