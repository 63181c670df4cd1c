"""Centralized configuration management for the text-patch MCP system.

This module provides a single source of truth for configuration including
environment variables, storage location, logging and server settings.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Centralized settings for the text-patch MCP system."""

    # === Storage Configuration ===
    storage_backend: str = Field(default="auto", description="Storage backend: 'auto' or 'local'")
    storage_root_dir: str = Field(
        default=".", description="Root directory that relative storage paths resolve against"
    )

    # === Workspace Configuration ===
    working_dir: str | None = Field(
        default=None, description="Directory paths are displayed relative to (defaults to cwd)"
    )
    validate_syntax: bool = Field(
        default=True, description="Check patched files for syntax errors and report warnings"
    )

    # === Runtime Detection ===
    pytest_current_test: str | None = Field(default=None, description="Set by pytest while a test runs")

    # === HTTP SSE Server Configuration ===
    sse_host: str = Field(default="localhost", description="SSE server host")
    sse_port: int = Field(default=3001, description="SSE server port")

    # === Observability ===
    log_level: str = Field(default="INFO", description="Level of the tool call and error logs")
    structured_logging: bool = Field(default=True, description="Write the error log as JSON lines")
    enable_metrics: bool = Field(default=True, description="Serve OpenTelemetry metrics at /metrics")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def is_test_environment(self) -> bool:
        """True while running under pytest."""
        return "PYTEST_CURRENT_TEST" in os.environ or self.pytest_current_test is not None

    @property
    def cwd_path(self) -> Path:
        """Get the working directory used for display paths."""
        return Path(self.working_dir).resolve() if self.working_dir else Path.cwd()


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading .env on first use."""
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings


def reset_settings():
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
