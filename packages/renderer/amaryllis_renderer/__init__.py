"""Renderer package for procedural profile avatars."""

from .errors import (
    AvatarError,
    DegenerateRemapRangeError,
    FontLoadError,
    InvalidColorError,
    InvalidDimensionsError,
    UnsupportedFormatError,
)
from .export import encode, save, to_data_url
from .font import FontResource, load_default_font
from .gradients import (
    LinearGradient,
    blues,
    custom_gradient,
    get_gradient,
    greens,
    greys,
    list_gradients,
    oranges,
    purples,
    reds,
)
from .initials import extract_initials
from .models import RGBA, Avatar, TextLabel, parse_rgba
from .noise import NoiseField, random_seed
from .overlay import apply_text_overlay
from .renderer import AvatarRenderer, render_gradient, render_solid
from .utils import remap

__all__ = [
    "Avatar",
    "AvatarError",
    "AvatarRenderer",
    "DegenerateRemapRangeError",
    "FontLoadError",
    "FontResource",
    "InvalidColorError",
    "InvalidDimensionsError",
    "LinearGradient",
    "NoiseField",
    "RGBA",
    "TextLabel",
    "UnsupportedFormatError",
    "apply_text_overlay",
    "blues",
    "custom_gradient",
    "encode",
    "extract_initials",
    "get_gradient",
    "greens",
    "greys",
    "list_gradients",
    "load_default_font",
    "oranges",
    "parse_rgba",
    "purples",
    "random_seed",
    "reds",
    "remap",
    "render_gradient",
    "render_solid",
    "save",
    "to_data_url",
]
