"""
Exceptions raised by stop containers and gradients.

Every rejected edit or query raises :class:`InvalidStopOperation`, so callers
can tell a bad gradient operation apart from an unrelated failure. It derives
from ``ValueError`` because all of these are bad-argument errors.
"""


class InvalidStopOperation(ValueError):
    """A stop edit or lookup that cannot be performed.

    Raised for positions outside [0, 1], inserting onto an occupied position,
    moving onto an occupied position, and referring to a position that holds
    no stop. The stop container is left unchanged whenever this is raised.
    """


class EmptyGradientError(InvalidStopOperation):
    """A color was requested from a gradient that has no stops."""


__all__ = ["InvalidStopOperation", "EmptyGradientError"]
