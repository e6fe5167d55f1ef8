from __future__ import annotations
from typing import Mapping, Optional, Sequence, Tuple, Union
from boundednumbers import UnitFloat
from numpy import ndarray

Scalar = int | float
ChannelTuple = Tuple[float, float, float, float]
# Anything Color.coerce accepts: a Color, an (r, g, b[, a]) sequence or array,
# or a mapping with "r", "g", "b" and optionally "a" keys.
ColorLike = Union["Color", Sequence[Scalar], ndarray, Mapping[str, Scalar]]
IndexPair = Tuple[Optional[int], Optional[int]]
CHANNELS = ("r", "g", "b", "a")

__all__ = ["Scalar", "ChannelTuple", "ColorLike", "IndexPair", "UnitFloat", "CHANNELS"]
