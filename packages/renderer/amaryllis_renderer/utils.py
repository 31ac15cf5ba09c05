"""Numeric helpers shared by the fill strategies."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

from .errors import DegenerateRemapRangeError

T = TypeVar("T", float, np.ndarray)


def remap(t: T, a: float, b: float, c: float, d: float) -> T:
    """Map ``t`` linearly from the range [a, b] onto [c, d].

    Works element-wise on numpy arrays.
    """
    if b == a:
        raise DegenerateRemapRangeError(a)
    return (t - a) * ((d - c) / (b - a)) + c
