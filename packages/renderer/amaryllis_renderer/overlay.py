"""Centered initials overlay shared by every fill strategy."""

from __future__ import annotations

from PIL import Image

from .font import FontResource
from .models import Avatar


def text_scale(avatar: Avatar) -> tuple[float, float]:
    return (avatar.width / 2.0, avatar.height / 2.0)


def text_position(avatar: Avatar, text_size: tuple[int, int], offset_px: int) -> tuple[int, int]:
    text_width, text_height = text_size
    x = avatar.width // 2 - text_width // 2
    y = avatar.height // 2 - text_height // 2 - offset_px
    return (x, y)


def apply_text_overlay(image: Image.Image, avatar: Avatar, font: FontResource, offset_px: int = 6) -> Image.Image:
    if avatar.label is None:
        return image

    scale = text_scale(avatar)
    mask = font.rasterize(avatar.label.text, scale)
    font.draw_mask(image, mask, text_position(avatar, mask.size, offset_px), avatar.label.color)
    return image
