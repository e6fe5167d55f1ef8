import pytest

from colorstops import Color, Gradient, StopList


@pytest.fixture
def black_to_white():
    """Black at 0, white at 0.5: the reference two-stop gradient."""
    gradient = Gradient()
    gradient.add_stop(0, {"r": 0, "g": 0, "b": 0, "a": 1})
    gradient.add_stop(0.5, {"r": 255, "g": 255, "b": 255, "a": 1})
    return gradient


@pytest.fixture
def five_stops():
    stops = StopList()
    for position, value in [(0.8, 80), (0.0, 0), (0.4, 40), (1.0, 100), (0.2, 20)]:
        stops.add(position, Color(value, value, value))
    return stops
