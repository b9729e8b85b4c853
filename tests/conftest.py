"""Shared pytest configuration and fixtures for all tests."""

import textwrap
from collections.abc import Callable
from pathlib import Path

import mongomock
import pymongo.errors
import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    config.addinivalue_line("markers", "integration: tests that run the plugin inside an aiohttp application")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Schema File Helpers
# =============================================================================


VALID_SCHEMA_SOURCE = """
from pydantic import BaseModel

name = "{name}"


class {name}(BaseModel):
    title: str
    pages: int = 0


schema = {name}
"""


def write_schema_file(folder: Path, filename: str, model_name: str) -> Path:
    """Write a schema module exporting a pydantic model called ``model_name``."""
    path = folder / filename
    path.write_text(textwrap.dedent(VALID_SCHEMA_SOURCE.format(name=model_name)))
    return path


# =============================================================================
# Client Doubles
# =============================================================================


class TrackedMongoClient(mongomock.MongoClient):
    """In-memory client that remembers whether it was closed."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.closed = False

    def close(self):
        self.closed = True
        super().close()


class RecordingClientFactory:
    """Client factory that records connection URIs and hands out mongomock clients."""

    def __init__(self) -> None:
        self.uris: list[str] = []
        self.clients: list[TrackedMongoClient] = []

    def __call__(self, uri: str) -> TrackedMongoClient:
        self.uris.append(uri)
        client = TrackedMongoClient()
        self.clients.append(client)
        return client


class UnreachableClient:
    """Client whose handshake always fails."""

    def __init__(self, error: Exception):
        self.error = error
        self.closed = False

    def server_info(self):
        raise self.error

    def close(self):
        self.closed = True


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def schemas_dir(tmp_path: Path) -> Path:
    """Empty schema folder."""
    folder = tmp_path / "models"
    folder.mkdir()
    return folder


@pytest.fixture
def write_schema() -> Callable[[Path, str, str], Path]:
    return write_schema_file


@pytest.fixture
def client_factory() -> RecordingClientFactory:
    return RecordingClientFactory()


@pytest.fixture
def connection_error() -> pymongo.errors.ServerSelectionTimeoutError:
    return pymongo.errors.ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")


@pytest.fixture
def unreachable_client(connection_error) -> UnreachableClient:
    return UnreachableClient(connection_error)
