"""Error types raised by the avatar renderer."""

from __future__ import annotations


class AvatarError(Exception):
    """Base class for avatar rendering failures."""


class InvalidDimensionsError(AvatarError, ValueError):
    def __init__(self, width: object, height: object) -> None:
        super().__init__(f"Avatar dimensions must be positive integers, got {width!r}x{height!r}")
        self.width = width
        self.height = height


class DegenerateRemapRangeError(AvatarError, ValueError):
    def __init__(self, bound: float) -> None:
        super().__init__(f"Remap source range is empty: a == b == {bound!r}")
        self.bound = bound


class InvalidColorError(AvatarError, ValueError):
    pass


class FontLoadError(AvatarError, RuntimeError):
    pass


class UnsupportedFormatError(AvatarError, ValueError):
    pass
