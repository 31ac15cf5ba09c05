"""Color ramps mapping a scalar in [0, 1] to RGBA, plus built-in presets."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from .models import RGBA, ColorLike, parse_rgba

GradientFn = Callable[[float], Sequence[int]]


class LinearGradient:
    """Piecewise-linear interpolation between color stops.

    Positions default to evenly spaced over [0, 1]. Inputs outside [0, 1] are
    clamped to the end colors.
    """

    def __init__(self, colors: Sequence[ColorLike], positions: Sequence[float] | None = None) -> None:
        if len(colors) < 2:
            raise ValueError("A gradient needs at least two colors")
        if positions is None:
            positions = np.linspace(0.0, 1.0, len(colors)).tolist()
        if len(positions) != len(colors):
            raise ValueError("Gradient positions and colors must have the same length")
        if any(b < a for a, b in zip(positions, positions[1:])):
            raise ValueError("Gradient positions must be non-decreasing")
        if positions[0] < 0.0 or positions[-1] > 1.0:
            raise ValueError("Gradient positions must lie within [0, 1]")

        self.colors: list[RGBA] = [parse_rgba(c) for c in colors]
        self._positions = np.asarray(positions, dtype=np.float64)
        self._channels = np.asarray(self.colors, dtype=np.float64)

    def __call__(self, t: float) -> RGBA:
        return self.at(t)

    def at(self, t: float) -> RGBA:
        r, g, b, a = self.at_array(np.asarray([t], dtype=np.float64))[0]
        return (int(r), int(g), int(b), int(a))

    def at_array(self, t: np.ndarray) -> np.ndarray:
        """Vectorized lookup; returns uint8 RGBA with a trailing axis of 4."""
        flat = np.clip(np.asarray(t, dtype=np.float64).ravel(), 0.0, 1.0)
        out = np.empty((flat.size, 4), dtype=np.float64)
        for channel in range(4):
            out[:, channel] = np.interp(flat, self._positions, self._channels[:, channel])
        return np.rint(out).astype(np.uint8).reshape(np.shape(t) + (4,))


def custom_gradient(*colors: ColorLike) -> LinearGradient:
    return LinearGradient(list(colors))


_PRESETS: dict[str, tuple[str, ...]] = {
    "reds": ("#fff5f0", "#fee0d2", "#fcbba1", "#fc9272", "#fb6a4a", "#ef3b2c", "#cb181d", "#a50f15", "#67000d"),
    "blues": ("#f7fbff", "#deebf7", "#c6dbef", "#9ecae1", "#6baed6", "#4292c6", "#2171b5", "#08519c", "#08306b"),
    "greens": ("#f7fcf5", "#e5f5e0", "#c7e9c0", "#a1d99b", "#74c476", "#41ab5d", "#238b45", "#006d2c", "#00441b"),
    "greys": ("#ffffff", "#f0f0f0", "#d9d9d9", "#bdbdbd", "#969696", "#737373", "#525252", "#252525", "#000000"),
    "oranges": ("#fff5eb", "#fee6ce", "#fdd0a2", "#fdae6b", "#fd8d3c", "#f16913", "#d94801", "#a63603", "#7f2704"),
    "purples": ("#fcfbfd", "#efedf5", "#dadaeb", "#bcbddc", "#9e9ac8", "#807dba", "#6a51a3", "#54278f", "#3f007d"),
}


def list_gradients() -> list[str]:
    return sorted(_PRESETS.keys())


def get_gradient(name: str) -> LinearGradient:
    try:
        return LinearGradient(_PRESETS[name.lower()])
    except KeyError:
        raise ValueError(f"Unknown gradient preset: {name}") from None


def reds() -> LinearGradient:
    return get_gradient("reds")


def blues() -> LinearGradient:
    return get_gradient("blues")


def greens() -> LinearGradient:
    return get_gradient("greens")


def greys() -> LinearGradient:
    return get_gradient("greys")


def oranges() -> LinearGradient:
    return get_gradient("oranges")


def purples() -> LinearGradient:
    return get_gradient("purples")
