"""Configuration loading and validation for the notification engine."""

from __future__ import annotations

from copy import deepcopy
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from .exceptions import ConfigValidationError

import tomllib  # stdlib since Python 3.11 (project requires >=3.11)

LOGGER = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "switchboard"
CONFIG_PATH = CONFIG_DIR / "config.toml"

VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class BusConfig(BaseModel):
    """Dispatch behavior of the notification bus."""

    snapshot_dispatch: bool = True
    isolate_handler_errors: bool = False
    thread_safe: bool = False


class LoggingConfig(BaseModel):
    """Logging behavior and output destinations."""

    level: str = "INFO"
    structured: bool = True
    log_to_file: bool = False
    log_file_path: str = "~/.local/state/switchboard/switchboard.log"

    @field_validator("level", mode="before")
    @classmethod
    def _validate_level(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("Logging level must be a string.")
        normalized = value.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(f"Unsupported log level {normalized!r}.")
        return normalized

    @field_validator("log_file_path", mode="before")
    @classmethod
    def _validate_log_file_path(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("log_file_path must be a string.")
        normalized = value.strip()
        if not normalized:
            raise ValueError("log_file_path must not be empty.")
        return normalized


class Config(BaseModel):
    """Root configuration model for all sections."""

    bus: BusConfig = BusConfig()
    logging: LoggingConfig = LoggingConfig()


DEFAULT_CONFIG: dict[str, dict[str, Any]] = Config().model_dump()


def _read_toml(path: Path) -> dict[str, Any]:
    """Return the parsed file, or an empty table when it is absent or unreadable."""
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        LOGGER.warning(
            "config.unreadable",
            extra={"event": "config.unreadable", "path": str(path), "error": str(exc)},
        )
        return {}


def load_config(config_path: Path | None = None) -> dict[str, dict[str, Any]]:
    """
    Load configuration from TOML and validate it into a plain dict.

    Sections and keys missing from the file take their model defaults. A
    file that fails validation is ignored as a whole, so a typo never
    leaves the engine half-configured. Nothing is created on disk.
    """
    target_path = config_path or CONFIG_PATH
    raw_data = _read_toml(target_path)
    try:
        return Config.model_validate(raw_data).model_dump()
    except ValidationError as exc:
        LOGGER.warning(
            "config.invalid",
            extra={
                "event": "config.invalid",
                "path": str(target_path),
                "errors": exc.error_count(),
            },
        )
        return deepcopy(DEFAULT_CONFIG)
    except Exception as exc:  # noqa: BLE001 - unexpected model construction failure.
        raise ConfigValidationError(f"Unable to validate configuration: {exc}") from exc
