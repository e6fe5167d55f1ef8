from __future__ import annotations
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any, Dict, Iterator, cast
from numpy import ndarray
import numpy as np
from ..types.color_types import CHANNELS, ChannelTuple, ColorLike, Scalar


class Color:
    """
    Four-channel color value (red, green, blue, alpha).

    ``r``, ``g`` and ``b`` are conventionally 0-255 and ``a`` 0-1, but channels
    are stored exactly as given: nothing is clamped or range checked. Instances
    are frozen after ``__init__`` so they can be shared between stops, gradients
    and callers without copying.
    """
    __slots__ = ('_value', '_is_frozen')  # no __dict__ → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Scalar = 1.0) -> None:
        for name, channel in zip(CHANNELS, (r, g, b, a)):
            if isinstance(channel, bool) or not isinstance(channel, Real):
                raise TypeError(
                    f"Color channel {name!r} must be a real number, got {type(channel).__name__}"
                )
        self._value = cast(ChannelTuple, (r, g, b, a))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def coerce(cls, color: ColorLike) -> Color:
        """
        Build a Color from any supported color-like value.

        Args:
            color: A Color, an ``(r, g, b)`` / ``(r, g, b, a)`` sequence or
                numpy array, or a mapping with ``r``, ``g``, ``b`` and an
                optional ``a`` key. A missing alpha defaults to 1.

        Returns:
            A new Color holding copies of the channel values.
        """
        if isinstance(color, Color):
            return cls(*color._value)

        if isinstance(color, Mapping):
            missing = [name for name in CHANNELS[:3] if name not in color]
            if missing:
                raise ValueError(f"Color mapping is missing channel(s): {', '.join(missing)}")
            return cls(color["r"], color["g"], color["b"], color.get("a", 1.0))

        if isinstance(color, ndarray):
            if color.ndim != 1:
                raise ValueError(f"Color array must be 1-dimensional, got shape {color.shape}")
            color = color.tolist()

        if isinstance(color, (str, bytes)) or not isinstance(color, Sequence):
            raise TypeError(f"Cannot build a Color from {type(color).__name__}")
        if len(color) not in (3, 4):
            raise ValueError(f"Color expects 3 or 4 channels, got {len(color)}")
        return cls(*color)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> Scalar:
        return self._value[0]

    @property
    def g(self) -> Scalar:
        return self._value[1]

    @property
    def b(self) -> Scalar:
        return self._value[2]

    @property
    def a(self) -> Scalar:
        return self._value[3]

    @property
    def value(self) -> ChannelTuple:
        return self._value

    def as_tuple(self) -> ChannelTuple:
        return self._value

    def as_dict(self) -> Dict[str, Scalar]:
        return dict(zip(CHANNELS, self._value))

    def as_array(self) -> ndarray:
        """Return the channels as a float64 array of shape (4,)."""
        return np.array(self._value, dtype=np.float64)

    def with_alpha(self, alpha: Scalar) -> Color:
        """Return a new Color with the same RGB channels and a new alpha."""
        return self.__class__(self.r, self.g, self.b, alpha)

    def copy(self) -> Color:
        return self.__class__(*self._value)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(r={r!r}, g={g!r}, b={b!r}, a={a!r})"
