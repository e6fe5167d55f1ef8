from numbers import Real


def is_unit_position(position: Real) -> bool:
    """Check that a stop position lies in the closed interval [0, 1]."""
    return 0.0 <= position <= 1.0
