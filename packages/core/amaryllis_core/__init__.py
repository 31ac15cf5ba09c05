"""Core services for avatar settings and logging."""

from .config import (
    DEFAULT_NOISE_SCALE,
    DEFAULT_TEXT_OFFSET_PX,
    AvatarConfig,
    ExportConfig,
    RenderConfig,
    config_path,
    load_config,
    save_config,
)
from .logging_setup import JsonFormatter, configure_logging, get_logger

__all__ = [
    "AvatarConfig",
    "DEFAULT_NOISE_SCALE",
    "DEFAULT_TEXT_OFFSET_PX",
    "ExportConfig",
    "JsonFormatter",
    "RenderConfig",
    "config_path",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
]
