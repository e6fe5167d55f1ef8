from __future__ import annotations
from typing import Callable
import numpy as np
from ..colors.color import Color

Interpolator = Callable[[Color, Color, float], Color]


def lerp(color1: Color, color2: Color, factor: float) -> Color:
    """
    Linearly blend two colors channel by channel.

    Args:
        color1: Color at factor 0
        color2: Color at factor 1
        factor: Blend weight. Not clamped; values outside [0, 1] extrapolate.

    Returns:
        New Color with each channel equal to
        ``factor * color2 + (1 - factor) * color1``
    """
    start = color1.as_array()
    end = color2.as_array()
    blended = end * factor + start * (1 - factor)
    return Color(*blended.tolist())


def step(color1: Color, color2: Color, factor: float) -> Color:
    """Hard-edged blend: ``color1`` until the factor reaches 1, then ``color2``."""
    if factor >= 1.0:
        return color2.copy()
    return color1.copy()


__all__ = ["Interpolator", "lerp", "step"]
