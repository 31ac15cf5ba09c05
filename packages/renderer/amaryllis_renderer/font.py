"""Bundled TrueType font: text measurement and coverage-blended drawing."""

from __future__ import annotations

import threading
from functools import lru_cache
from io import BytesIO
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from amaryllis_core.logging_setup import get_logger

from .errors import FontLoadError
from .models import RGBA

DEFAULT_FONT_PATH = Path(__file__).with_name("assets") / "DejaVuSans.ttf"

logger = get_logger("font")


class FontResource:
    """Read-only font data with a per-size FreeType cache.

    ``scale`` is an ``(x, y)`` pair in pixels. Glyphs are rasterized at the
    vertical size and stretched horizontally when the two differ.
    """

    def __init__(self, data: bytes, name: str = "<bytes>") -> None:
        self.name = name
        self._data = data
        self._sizes: dict[int, ImageFont.FreeTypeFont] = {}
        self._lock = threading.Lock()
        # Parse eagerly so bad data fails at load time, not mid-render.
        self._font(16)

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "<bytes>") -> FontResource:
        return cls(data, name=name)

    @classmethod
    def from_path(cls, path: Path | str) -> FontResource:
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            logger.error("font read failed: %s", path, extra={"event": "font_load_failed"})
            raise FontLoadError(f"Cannot read font file {path}: {exc}") from exc
        return cls(data, name=path.name)

    def _font(self, size: int) -> ImageFont.FreeTypeFont:
        with self._lock:
            font = self._sizes.get(size)
            if font is None:
                try:
                    font = ImageFont.truetype(BytesIO(self._data), size)
                except (OSError, ValueError) as exc:
                    logger.error("font parse failed: %s", self.name, extra={"event": "font_load_failed"})
                    raise FontLoadError(f"Cannot parse font {self.name}: {exc}") from exc
                self._sizes[size] = font
            return font

    def rasterize(self, text: str, scale: tuple[float, float]) -> Image.Image:
        """Coverage mask ("L" mode) cropped to the inked text at ``scale``."""
        scale_x, scale_y = scale
        font = self._font(max(1, round(scale_y)))
        left, top, right, bottom = font.getbbox(text)
        mask = Image.new("L", (max(1, right - left), max(1, bottom - top)), 0)
        ImageDraw.Draw(mask).text((-left, -top), text, font=font, fill=255)

        ink = mask.getbbox()
        if ink is None:
            return Image.new("L", (0, 0), 0)
        mask = mask.crop(ink)

        if scale_x != scale_y:
            width = max(1, round(mask.width * scale_x / scale_y))
            mask = mask.resize((width, mask.height), Image.Resampling.BILINEAR)
        return mask

    def measure(self, text: str, scale: tuple[float, float]) -> tuple[int, int]:
        """Pixel extent of the inked text at ``scale``."""
        return self.rasterize(text, scale).size

    def draw(
        self,
        image: Image.Image,
        text: str,
        position: tuple[int, int],
        scale: tuple[float, float],
        color: RGBA,
    ) -> None:
        """Composite ``text`` onto an RGBA ``image`` with its ink box at ``position``."""
        self.draw_mask(image, self.rasterize(text, scale), position, color)

    @staticmethod
    def draw_mask(image: Image.Image, mask: Image.Image, position: tuple[int, int], color: RGBA) -> None:
        if mask.width == 0 or mask.height == 0:
            return

        alpha = color[3]
        if alpha != 255:
            mask = mask.point(lambda v: v * alpha // 255)
        layer = Image.new("RGBA", mask.size, color)
        layer.putalpha(mask)

        x, y = position
        source = (max(0, -x), max(0, -y))
        if source[0] >= layer.width or source[1] >= layer.height:
            return
        image.alpha_composite(layer, dest=(max(0, x), max(0, y)), source=source)


@lru_cache(maxsize=1)
def load_default_font() -> FontResource:
    return FontResource.from_path(DEFAULT_FONT_PATH)
