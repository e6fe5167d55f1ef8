from .color_types import (
    Scalar,
    ChannelTuple,
    ColorLike,
    IndexPair,
    UnitFloat,
    CHANNELS,
)

__all__ = [
    "Scalar",
    "ChannelTuple",
    "ColorLike",
    "IndexPair",
    "UnitFloat",
    "CHANNELS",
]
