"""Render and export settings schema with load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .logging_setup import get_logger


CONFIG_VERSION = 1
DEFAULT_NOISE_SCALE = 0.0025
DEFAULT_TEXT_OFFSET_PX = 6
EXPORT_FORMATS = ("png", "webp", "jpeg")

logger = get_logger("config")


@dataclass
class RenderConfig:
    noise_scale: float = DEFAULT_NOISE_SCALE
    text_offset_px: int = DEFAULT_TEXT_OFFSET_PX
    font_path: str | None = None


@dataclass
class ExportConfig:
    default_format: str = "webp"
    quality: int = 90
    lossless: bool = False


@dataclass
class AvatarConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


DEFAULT_CONFIG = AvatarConfig()


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Amaryllis" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Amaryllis" / "config.json"
    return Path.home() / ".config" / "amaryllis" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in (raw or {}).items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AvatarConfig) -> None:
    try:
        scale = float(cfg.render.noise_scale)
    except (TypeError, ValueError):
        scale = DEFAULT_NOISE_SCALE
    cfg.render.noise_scale = scale if scale > 0 else DEFAULT_NOISE_SCALE
    cfg.render.text_offset_px = int(cfg.render.text_offset_px)
    if cfg.render.font_path is not None:
        cfg.render.font_path = str(cfg.render.font_path)


def _normalize_export(cfg: AvatarConfig) -> None:
    fmt = str(cfg.export.default_format).lower()
    if fmt == "jpg":
        fmt = "jpeg"
    cfg.export.default_format = fmt if fmt in EXPORT_FORMATS else "webp"
    cfg.export.quality = max(1, min(100, int(cfg.export.quality)))
    cfg.export.lossless = bool(cfg.export.lossless)


def load_config(path: Path | None = None) -> AvatarConfig:
    path = path or config_path()
    if not path.exists():
        return AvatarConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("unreadable config, using defaults: %s", path, extra={"event": "config_unreadable"})
        return AvatarConfig()

    cfg = AvatarConfig(
        config_version=int(raw.get("config_version", CONFIG_VERSION)),
        render=_merge(RenderConfig, raw.get("render", {})),
        export=_merge(ExportConfig, raw.get("export", {})),
    )

    _normalize_render(cfg)
    _normalize_export(cfg)
    return cfg


def save_config(cfg: AvatarConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
