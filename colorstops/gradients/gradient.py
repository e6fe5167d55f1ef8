from __future__ import annotations
import math
import warnings
from typing import Iterable, Optional, Sequence, Tuple
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat
from ..colors.color import Color
from ..errors import EmptyGradientError, InvalidStopOperation
from ..types.color_types import ColorLike
from ..utils.default import value_or_default
from ..utils.positions import is_unit_position
from .interpolators import Interpolator, lerp
from .stop_list import Stop, StopList


class Gradient:
    """
    Color gradient defined by stops on the [0, 1] axis.

    Stop edits are delegated to an owned :class:`StopList`. Colors between two
    stops are produced by ``interpolator``, a ``(Color, Color, factor) -> Color``
    callable that can be swapped at any time. Positions before the first stop or
    after the last one take that stop's color; nothing is extrapolated.

    >>> gradient = Gradient()
    >>> gradient.add_stop(0, (0, 0, 0, 1))
    >>> gradient.add_stop(0.5, (255, 255, 255, 1))
    >>> gradient.get_color(0.25)
    Color(r=127.5, g=127.5, b=127.5, a=1.0)
    """

    def __init__(
        self,
        interpolator: Optional[Interpolator] = None,
        stops: Optional[Iterable[Tuple[UnitFloat, ColorLike]]] = None,
    ) -> None:
        self._stops = StopList()
        self.interpolator = value_or_default(interpolator, lerp)
        for position, color in value_or_default(stops, ()):
            self.add_stop(position, color)

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[ColorLike],
        interpolator: Optional[Interpolator] = None,
    ) -> "Gradient":
        """
        Create a gradient with ``colors`` spread evenly across [0, 1].

        A single color becomes one stop at 0; an empty sequence gives an
        empty gradient.
        """
        count = len(colors)
        if count == 1:
            positions = [0.0]
        else:
            positions = np.linspace(0.0, 1.0, count).tolist()
        return cls(interpolator=interpolator, stops=zip(positions, colors))

    @property
    def interpolator(self) -> Interpolator:
        return self._interpolator

    @interpolator.setter
    def interpolator(self, interpolator: Interpolator) -> None:
        if not callable(interpolator):
            raise TypeError("interpolator must be callable")
        self._interpolator = interpolator

    @property
    def stops(self) -> Tuple[Stop, ...]:
        return tuple(self._stops)

    # ------------------ STOP EDITING ------------------
    def add_stop(self, position: UnitFloat, color: ColorLike) -> None:
        self._stops.add(position, color)

    def replace_stop(self, position: UnitFloat, color: ColorLike) -> None:
        self._stops.replace(position, color)

    def move(self, position: UnitFloat, to: UnitFloat) -> None:
        self._stops.move(position, to)

    def remove(self, position: UnitFloat) -> None:
        self._stops.remove(position)

    # ------------------ QUERIES ------------------
    def get_color(self, position: float) -> Color:
        """
        Get the color at a position along the gradient.

        Args:
            position: Query position. Positions outside [0, 1] resolve to the
                nearest edge stop with a warning.

        Returns:
            A new Color; never shared with the stored stops.

        Raises:
            EmptyGradientError: the gradient has no stops
        """
        if math.isnan(position):
            raise InvalidStopOperation("Can't get color at a NaN position.")

        lower, upper = self._stops.get_index_pair(position)
        if lower is None and upper is None:
            raise EmptyGradientError("Can't get color from an empty gradient.")

        if not is_unit_position(position):
            warnings.warn(
                f"Position {position} is outside [0, 1]; using the nearest edge stop.",
                UserWarning,
                stacklevel=2,
            )

        # exact hit on a stop
        if lower == upper:
            return self._stops.get(lower).color.copy()
        # before the first stop
        if lower is None:
            return self._stops.get(upper).color.copy()
        # past the last stop
        if upper is None:
            return self._stops.get(lower).color.copy()

        stop1 = self._stops.get(lower)
        stop2 = self._stops.get(upper)
        factor = (position - stop1.position) / (stop2.position - stop1.position)
        return Color.coerce(self.interpolator(stop1.color, stop2.color, factor))

    def sample(self, steps: int) -> NDArray:
        """
        Evaluate the gradient at ``steps`` evenly spaced positions.

        Returns:
            float64 array of shape (steps, 4) holding (r, g, b, a) rows
        """
        if steps < 1:
            raise ValueError("steps must be >= 1")
        u = np.linspace(0.0, 1.0, steps)
        return np.array([self.get_color(float(p)).as_tuple() for p in u], dtype=np.float64)

    def __getitem__(self, position: float) -> Color:
        return self.get_color(position)

    def __len__(self) -> int:
        return len(self._stops)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._stops)!r})"


__all__ = ["Gradient"]
