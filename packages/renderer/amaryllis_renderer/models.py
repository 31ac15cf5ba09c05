"""Typed avatar models."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from PIL import ImageColor

from .errors import InvalidColorError, InvalidDimensionsError
from .initials import extract_initials

RGBA = tuple[int, int, int, int]
ColorLike = str | Sequence[int]


def parse_rgba(color: ColorLike) -> RGBA:
    if isinstance(color, str):
        try:
            return ImageColor.getcolor(color, "RGBA")  # type: ignore[return-value]
        except ValueError as exc:
            raise InvalidColorError(f"Unknown color: {color!r}") from exc

    channels = list(color)
    if len(channels) == 3:
        channels.append(255)
    if len(channels) != 4:
        raise InvalidColorError(f"Expected 3 or 4 channels, got {len(channels)}")
    for value in channels:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise InvalidColorError(f"Channel values must be ints in 0..255, got {tuple(channels)!r}")
    return (channels[0], channels[1], channels[2], channels[3])


def check_dimensions(width: int, height: int) -> None:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDimensionsError(width, height)


@dataclass(frozen=True)
class TextLabel:
    text: str
    color: RGBA


@dataclass(frozen=True)
class Avatar:
    """Avatar descriptor: pixel size plus the optional initials label."""

    width: int
    height: int
    label: TextLabel | None = None

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        name: str | None = None,
        text_color: ColorLike | None = None,
    ) -> Avatar:
        # A name without a text color never produces a label.
        if name is None or text_color is None:
            return cls(width, height)

        color = parse_rgba(text_color)
        initials = extract_initials(name)
        if initials is None:
            return cls(width, height)
        return cls(width, height, TextLabel(text=initials, color=color))

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def initials(self) -> str | None:
        return self.label.text if self.label is not None else None

    @property
    def text_color(self) -> RGBA | None:
        return self.label.color if self.label is not None else None
