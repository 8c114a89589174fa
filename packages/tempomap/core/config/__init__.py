"""Configuration management for tempomap."""

from tempomap.core.config.loader import (
    apply_logging_config,
    detect_format,
    load_app_config,
    load_config,
    load_timetable,
    load_timetable_config,
    save_config,
)
from tempomap.core.config.models import (
    AppConfig,
    BeatDurationModel,
    ControlPointConfig,
    LoggingConfig,
    RationalModel,
    TimetableConfig,
)

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    "load_timetable_config",
    "load_timetable",
    "save_config",
    "apply_logging_config",
    # Models
    "AppConfig",
    "LoggingConfig",
    "TimetableConfig",
    "ControlPointConfig",
    "BeatDurationModel",
    "RationalModel",
]
