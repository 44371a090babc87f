"""Server configuration: pydantic settings loaded from an optional YAML file."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from medium_mcp.protocol.engine import (
    DEFAULT_PROTOCOL_VERSION,
    DEFAULT_SERVER_NAME,
    DEFAULT_SERVER_VERSION,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or fails validation."""


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Everything the process host needs to wire and run the server."""

    server_name: str = DEFAULT_SERVER_NAME
    server_version: str = DEFAULT_SERVER_VERSION
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    log_level: LogLevel = "INFO"
    announce_on_startup: bool = False
    fixture_path: Path | None = None
    client_factory: str | None = None
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    def with_overrides(self, **overrides: Any) -> ServerSettings:
        """Return a copy with every non-``None`` override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return ServerSettings.model_validate({**self.model_dump(), **changes})


class SettingsLoader:
    """Load and validate a YAML settings file into :class:`ServerSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ServerSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing. A relative
        ``fixture_path`` is resolved against the settings file's directory.

        Raises:
            ConfigError: On read errors, YAML parse errors or schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read {self._path}: {exc}") from exc

        try:
            data: Any = yaml.safe_load(os.path.expandvars(raw))
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Settings YAML must be a mapping")

        try:
            settings = ServerSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc

        if settings.fixture_path is not None and not settings.fixture_path.is_absolute():
            settings = settings.model_copy(update={"fixture_path": self._path.parent / settings.fixture_path})
        return settings


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def load_settings(path: Path | None = None, **overrides: Any) -> ServerSettings:
    """Load *path* (or defaults) and apply command-line overrides."""
    settings = SettingsLoader(path).load() if path is not None else ServerSettings()
    return settings.with_overrides(**overrides)
