from __future__ import annotations
from numbers import Real
from typing import Iterator, List, NamedTuple, Tuple
from boundednumbers import UnitFloat
from ..colors.color import Color
from ..errors import InvalidStopOperation
from ..types.color_types import ColorLike, IndexPair
from ..utils.positions import is_unit_position


class Stop(NamedTuple):
    """A color anchored at a position in [0, 1]."""
    position: float
    color: Color


def _out_of_range(position: float) -> InvalidStopOperation:
    return InvalidStopOperation(f"Stop position must be between 0 and 1, got {position}.")


def _not_found(position: float) -> InvalidStopOperation:
    return InvalidStopOperation(f"No stop with position {position} was found.")


class StopList:
    """
    Stops kept sorted by position, at most one stop per position.

    Lookups by position are binary searches over the backing list. Every
    mutation either succeeds or raises :class:`InvalidStopOperation` with the
    list left exactly as it was.

    Intervals between neighbouring stops are located with
    :meth:`get_index_pair`, which returns structural indices:

        (i, i)         position sits exactly on stop i
        (None, 0)      position is before the first stop
        (last, None)   position is past the last stop
        (i, i + 1)     position lies strictly between stops i and i + 1
    """

    __slots__ = ('_stops',)

    def __init__(self) -> None:
        self._stops: List[Stop] = []

    # ------------------ MUTATIONS ------------------
    def add(self, position: UnitFloat, color: ColorLike) -> None:
        """
        Insert a new stop at its sorted location.

        Raises:
            InvalidStopOperation: position is outside [0, 1] or already holds a stop
        """
        if not is_unit_position(position):
            raise _out_of_range(position)
        stop = Stop(position, Color.coerce(color))

        if not self._stops:
            self._stops.append(stop)
            return

        lower, upper = self.get_index_pair(position)
        if lower == upper:
            raise InvalidStopOperation(f"Stop already exists at position {position}. Stop was not added.")
        if lower is None:
            self._stops.insert(0, stop)
        elif upper is None:
            self._stops.append(stop)
        else:
            self._stops.insert(upper, stop)

    def replace(self, position: UnitFloat, color: ColorLike) -> None:
        """
        Give the stop at ``position`` a new color.

        Raises:
            InvalidStopOperation: no stop exists exactly at position
        """
        index = self._require_index(position)
        self._stops[index] = Stop(self._stops[index].position, Color.coerce(color))

    def move(self, position: UnitFloat, to: UnitFloat) -> None:
        """
        Reposition the stop at ``position`` to ``to``, keeping its color.

        The stop is taken out and re-inserted. If ``to`` is already occupied it
        is put back at its original index before the error is raised.

        Raises:
            InvalidStopOperation: no stop at position, ``to`` outside [0, 1],
                or ``to`` already holds a stop
        """
        if not is_unit_position(position) or not self._stops:
            raise _not_found(position)
        if not is_unit_position(to):
            raise _out_of_range(to)

        index = self.get_index(position)
        if index == -1:
            raise _not_found(position)
        stop = self._stops.pop(index)

        try:
            self.add(to, stop.color)
        except InvalidStopOperation:
            self._stops.insert(index, stop)
            raise InvalidStopOperation(
                f"Stop already exists at position {to}. Stop was not moved."
            ) from None

    def remove(self, position: UnitFloat) -> None:
        """
        Delete the stop at ``position``.

        Raises:
            InvalidStopOperation: no stop exists exactly at position
        """
        del self._stops[self._require_index(position)]

    def clear(self) -> None:
        self._stops.clear()

    # ------------------ LOOKUPS ------------------
    def get(self, index: int) -> Stop:
        """Return the stop at structural ``index`` (not a position)."""
        return self._stops[index]

    def get_index(self, position: float) -> int:
        """
        Return the index of the stop exactly at ``position``.

        Returns -1 if position is outside [0, 1], the list is empty, or no stop
        sits at that exact position.
        """
        if not is_unit_position(position) or not self._stops:
            return -1
        return self._search_index(position, 0, len(self._stops))

    def get_index_pair(self, position: float) -> IndexPair:
        """
        Return the indices of the stops bracketing ``position``.

        Each side is None when no stop exists there. A stop exactly at
        ``position`` is returned as both sides. Positions below 0 report
        ``(None, 0)`` and positions above 1 report ``(last, None)``.
        """
        if not self._stops:
            return None, None
        if position < 0:
            return None, 0
        if position > 1:
            return len(self._stops) - 1, None
        return self._search_pair(position, 0, len(self._stops))

    def _require_index(self, position: float) -> int:
        if not is_unit_position(position) or not self._stops:
            raise _not_found(position)
        index = self.get_index(position)
        if index == -1:
            raise _not_found(position)
        return index

    def _search_index(self, position: float, low: int, high: int) -> int:
        # searches the half-open range [low, high)
        if low >= high:
            return -1

        middle = low + ((high - low) >> 1)
        middle_position = self._stops[middle].position
        if position > middle_position:
            return self._search_index(position, middle + 1, high)
        if position < middle_position:
            return self._search_index(position, low, middle)
        return middle

    def _search_pair(self, position: float, low: int, high: int) -> IndexPair:
        # searches the half-open range [low, high); both halves keep the middle
        # stop so a position between two stops always ends in a 2-stop range
        size = high - low
        if size == 1:
            only = self._stops[low].position
            if position > only:
                return low, None
            if position < only:
                return None, low
            return low, low

        if size == 2:
            first = self._stops[low].position
            second = self._stops[low + 1].position
            if position == first:
                return low, low
            if position == second:
                return low + 1, low + 1
            if position > second:
                return low + 1, None
            if position < first:
                return None, low
            return low, low + 1

        middle = low + (size >> 1)
        middle_position = self._stops[middle].position
        if position > middle_position:
            return self._search_pair(position, middle, high)
        if position < middle_position:
            return self._search_pair(position, low, middle + 1)
        return middle, middle

    # ------------------ CONTAINER PROTOCOL ------------------
    @property
    def positions(self) -> Tuple[float, ...]:
        return tuple(stop.position for stop in self._stops)

    def copy(self) -> StopList:
        clone = self.__class__()
        clone._stops = list(self._stops)
        return clone

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[Stop]:
        return iter(tuple(self._stops))

    def __contains__(self, position: object) -> bool:
        if not isinstance(position, Real):
            return False
        return self.get_index(position) != -1

    def __repr__(self) -> str:
        inner = ", ".join(f"{stop.position}: {stop.color!r}" for stop in self._stops)
        return f"{self.__class__.__name__}([{inner}])"


__all__ = ["Stop", "StopList"]
