"""Encode rendered avatars to PNG, WEBP or JPEG."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path

from PIL import Image

from amaryllis_core.config import ExportConfig

from .errors import UnsupportedFormatError

_FORMATS = {
    "png": ("PNG", "image/png"),
    "webp": ("WEBP", "image/webp"),
    "jpeg": ("JPEG", "image/jpeg"),
    "jpg": ("JPEG", "image/jpeg"),
}


def _resolve(fmt: str) -> tuple[str, str]:
    try:
        return _FORMATS[fmt.lower().lstrip(".")]
    except KeyError:
        raise UnsupportedFormatError(f"Unsupported image format: {fmt}") from None


def encode(image: Image.Image, fmt: str | None = None, config: ExportConfig | None = None) -> bytes:
    config = config or ExportConfig()
    pil_format, _ = _resolve(fmt or config.default_format)

    options: dict[str, object] = {}
    if pil_format == "JPEG":
        # JPEG has no alpha channel.
        image = image.convert("RGB")
        options["quality"] = config.quality
    elif pil_format == "WEBP":
        options["quality"] = config.quality
        options["lossless"] = config.lossless

    buf = BytesIO()
    image.save(buf, format=pil_format, **options)
    return buf.getvalue()


def save(image: Image.Image, path: Path | str, fmt: str | None = None, config: ExportConfig | None = None) -> Path:
    path = Path(path)
    fmt = fmt or path.suffix or (config or ExportConfig()).default_format
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode(image, fmt, config))
    return path


def to_data_url(image: Image.Image, fmt: str = "png", config: ExportConfig | None = None) -> str:
    _, mime = _resolve(fmt)
    b64 = base64.b64encode(encode(image, fmt, config)).decode("ascii")
    return f"data:{mime};base64,{b64}"
