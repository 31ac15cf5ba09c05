"""Avatar image synthesis: solid and noisy-gradient fills."""

from __future__ import annotations

import random

import numpy as np
from PIL import Image

from amaryllis_core.config import RenderConfig
from amaryllis_core.logging_setup import get_logger

from .font import FontResource, load_default_font
from .gradients import GradientFn
from .models import Avatar, ColorLike, check_dimensions, parse_rgba
from .noise import NoiseField, random_seed
from .overlay import apply_text_overlay
from .utils import remap

logger = get_logger("renderer")


def _allocate(width: int, height: int, color: tuple[int, int, int, int]) -> Image.Image:
    check_dimensions(width, height)
    return Image.new("RGBA", (width, height), color)


class AvatarRenderer:
    """Builds RGBA avatar images from an ``Avatar`` descriptor."""

    def __init__(
        self,
        config: RenderConfig | None = None,
        font: FontResource | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or RenderConfig()
        self._font = font
        self._rng = rng or random.Random()

    @property
    def font(self) -> FontResource:
        if self._font is None:
            if self.config.font_path:
                self._font = FontResource.from_path(self.config.font_path)
            else:
                self._font = load_default_font()
        return self._font

    def render_solid(self, avatar: Avatar, fill_color: ColorLike) -> Image.Image:
        image = _allocate(avatar.width, avatar.height, parse_rgba(fill_color))
        self._overlay(image, avatar)
        logger.debug(
            "rendered solid avatar %dx%d",
            avatar.width,
            avatar.height,
            extra={"event": "render_solid"},
        )
        return image

    def render_gradient(
        self,
        avatar: Avatar,
        noise_scale: float | None,
        gradient: GradientFn,
        seed: int | None = None,
    ) -> Image.Image:
        """Fill with ``gradient`` sampled through seeded noise.

        ``noise_scale=None`` uses the configured default.
        """
        if noise_scale is None:
            noise_scale = self.config.noise_scale
        # Rejects NaN as well.
        if not noise_scale > 0:
            raise ValueError(f"noise_scale must be positive, got {noise_scale!r}")
        if seed is None:
            seed = random_seed(self._rng)

        check_dimensions(avatar.width, avatar.height)
        field = NoiseField(seed).grid(avatar.width, avatar.height, noise_scale)
        pixels = _colorize(remap(field, -1.0, 1.0, 0.0, 1.0), gradient)
        image = Image.fromarray(pixels)

        self._overlay(image, avatar)
        logger.debug(
            "rendered gradient avatar %dx%d seed=%d",
            avatar.width,
            avatar.height,
            seed,
            extra={"event": "render_gradient"},
        )
        return image

    def _overlay(self, image: Image.Image, avatar: Avatar) -> None:
        if avatar.label is None:
            return
        apply_text_overlay(image, avatar, self.font, self.config.text_offset_px)


def _colorize(t: np.ndarray, gradient: GradientFn) -> np.ndarray:
    at_array = getattr(gradient, "at_array", None)
    if at_array is not None:
        return np.ascontiguousarray(at_array(t), dtype=np.uint8)

    height, width = t.shape
    out = np.empty((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            out[y, x] = parse_rgba(tuple(gradient(float(t[y, x]))))
    return out


_default_renderer: AvatarRenderer | None = None


def default_renderer() -> AvatarRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = AvatarRenderer()
    return _default_renderer


def render_solid(avatar: Avatar, fill_color: ColorLike) -> Image.Image:
    return default_renderer().render_solid(avatar, fill_color)


def render_gradient(
    avatar: Avatar,
    noise_scale: float,
    gradient: GradientFn,
    seed: int | None = None,
) -> Image.Image:
    return default_renderer().render_gradient(avatar, noise_scale, gradient, seed=seed)
