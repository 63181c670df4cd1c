"""The pytest configuration for text-patch MCP testing.

Every test gets fresh settings and storage singletons; tool tests work in a
temporary directory that doubles as storage root and display working dir.
"""

import os

import pytest

from text_patch_mcp.config import reset_settings
from text_patch_mcp.storage import reset_storage


@pytest.fixture(scope="session", autouse=True)
def disable_metrics_for_tests():
    """Keep OpenTelemetry metrics off for the whole session."""
    original_value = os.environ.get("MCP_METRICS_ENABLED")
    os.environ["MCP_METRICS_ENABLED"] = "false"
    yield
    if original_value is not None:
        os.environ["MCP_METRICS_ENABLED"] = original_value
    else:
        os.environ.pop("MCP_METRICS_ENABLED", None)


@pytest.fixture(autouse=True)
def fresh_singletons():
    """Reset cached settings and storage around each test."""
    reset_settings()
    reset_storage()
    yield
    reset_settings()
    reset_storage()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Provide a temporary working directory for file tools."""
    tmp_path = tmp_path.resolve()
    monkeypatch.setenv("WORKING_DIR", str(tmp_path))
    monkeypatch.setenv("STORAGE_ROOT_DIR", str(tmp_path))
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    return tmp_path


@pytest.fixture
def file_factory(workspace):
    """Factory for creating test files inside the workspace."""

    def _create_file(name: str, content: str):
        path = workspace / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _create_file


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "integration: calls the registered MCP tools")
