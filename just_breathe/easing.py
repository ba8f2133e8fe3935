"""Easing functions for phase interpolation."""
from __future__ import annotations

from typing import Callable


def lerp(t: float, a: float, b: float) -> float:
    return a + (b - a) * t


def linear(t: float) -> float:
    return t


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    y = 2 * t - 2
    return y * y * y / 2 + 1


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in_out_cubic": ease_in_out_cubic,
}
