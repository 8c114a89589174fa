"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from tempomap.core.collections.timetable import Timetable
from tempomap.core.config.models import AppConfig, TimetableConfig
from tempomap.core.utils.json import read_json, write_json
from tempomap.core.utils.logging import configure_logging, get_logger

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("timetable.json")
        'json'
        >>> detect_format("timetable.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    logger.debug("Loading %s config from %s", fmt, path)

    if fmt == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def save_config(config: TimetableConfig | AppConfig, path: str | Path) -> None:
    """Write a config to JSON or YAML, chosen by the file extension.

    Args:
        config: Config to write
        path: Destination (.json, .yaml, or .yml)

    Raises:
        ValueError: If format is not supported
    """
    path = Path(path)
    fmt = detect_format(path)
    data = config.model_dump(mode="json", exclude_none=True)

    if fmt == "json":
        write_json(path, data)
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
    logger.info("Saved %s to %s", type(config).__name__, path)


def load_timetable_config(path: str | Path) -> TimetableConfig:
    """Load and validate a timetable configuration.

    Args:
        path: Path to timetable config file (.json, .yaml, or .yml)

    Returns:
        Validated TimetableConfig instance

    Raises:
        FileNotFoundError: If config file does not exist
        ValidationError: If config is invalid
    """
    return TimetableConfig.model_validate(load_config(path))


def load_timetable(path: str | Path) -> Timetable:
    """Load a timetable config and build the Timetable it describes.

    Example:
        >>> timetable = load_timetable("timetable.yaml")
        >>> timetable.get_time_at(BeatPoint.at(8))
    """
    config = load_timetable_config(path)
    get_logger(__name__, config_path=str(path)).info(
        "Loaded timetable from %s (%d control points)", path, len(config.control_points)
    )
    return config.build()


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Environment variables override the logging section:
    ``TEMPOMAP_LOG_LEVEL``, ``TEMPOMAP_LOG_STRUCTURED`` and ``TEMPOMAP_LOG_FILE``.

    Args:
        path: Path to app config file (.json, .yaml, or .yml)
              Defaults to tempomap.yaml

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()

    # Load config if file exists, otherwise use defaults
    if Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.debug("No app config at %s, using defaults", path)
        config = AppConfig()

    return _load_env_vars_into_config(config)


def apply_logging_config(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    configure_logging(
        level=config.logging.level,
        format_string=config.logging.format_string,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _load_env_vars_into_config(config: AppConfig) -> AppConfig:
    """Overlay environment variables onto the logging section.

    Args:
        config: AppConfig instance to update

    Returns:
        The config, copied with any overrides applied
    """
    updates: dict[str, Any] = {}

    level = os.getenv("TEMPOMAP_LOG_LEVEL")
    if level:
        logger.debug("Loaded TEMPOMAP_LOG_LEVEL from environment")
        updates["level"] = level.upper()

    structured = os.getenv("TEMPOMAP_LOG_STRUCTURED")
    if structured:
        updates["structured"] = structured.strip().lower() in _TRUE_VALUES

    filename = os.getenv("TEMPOMAP_LOG_FILE")
    if filename:
        updates["filename"] = filename

    if not updates:
        return config

    # Re-validate so a bad level from the environment is rejected
    logging_config = type(config.logging).model_validate(
        {**config.logging.model_dump(), **updates}
    )
    return config.model_copy(update={"logging": logging_config})
