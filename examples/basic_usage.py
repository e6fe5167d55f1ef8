"""Basic colorstops usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from colorstops import Color, Gradient, InvalidStopOperation, step


def demonstrate_stops() -> None:
    # Build a gradient and edit its stops.
    gradient = Gradient()
    gradient.add_stop(0, Color(0, 0, 0))
    gradient.add_stop(0.5, Color(255, 255, 255))
    print("Midway to white:", gradient.get_color(0.25))
    print("Past the last stop:", gradient.get_color(0.9))

    gradient.move(0.5, 1)
    gradient.replace_stop(0, (255, 0, 0))
    print("Stops after editing:", gradient.stops)

    try:
        gradient.add_stop(1, (0, 0, 255))
    except InvalidStopOperation as error:
        print("Rejected:", error)


def demonstrate_interpolators() -> None:
    # Swap the blending strategy on a live gradient.
    bands = Gradient.from_colors([(255, 0, 0), (0, 255, 0), (0, 0, 255)])
    print("Linear samples:\n", bands.sample(5))

    bands.interpolator = step
    print("Stepped samples:\n", bands.sample(5))


if __name__ == "__main__":
    demonstrate_stops()
    demonstrate_interpolators()
