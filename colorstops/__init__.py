"""
colorstops - color gradients built from sorted stops
====================================================

A gradient is a set of color stops on the normalized [0, 1] axis. The color
at any position comes from the stops bracketing it, blended by a pluggable
interpolator (linear per-channel by default).

Quick Start
-----------
>>> from colorstops import Gradient, Color
>>>
>>> gradient = Gradient()
>>> gradient.add_stop(0, Color(0, 0, 0))
>>> gradient.add_stop(0.5, Color(255, 255, 255))
>>> gradient.get_color(0.25)
Color(r=127.5, g=127.5, b=127.5, a=1.0)
>>> gradient.get_color(0.9)   # past the last stop, no extrapolation
Color(r=255, g=255, b=255, a=1.0)
>>>
>>> gradient.move(0.5, 1)
>>> gradient.replace_stop(0, (255, 0, 0))
>>> gradient.sample(3).shape
(3, 4)

Modules
-------
- colors: the immutable four-channel Color value
- gradients: StopList (sorted stops, binary searches), interpolators, Gradient
- errors: InvalidStopOperation and EmptyGradientError
"""

from .colors import Color
from .gradients import Gradient, Interpolator, Stop, StopList, lerp, step
from .errors import EmptyGradientError, InvalidStopOperation

__version__ = "1.0.0"

__all__ = [
    "Color",
    "Stop",
    "StopList",
    "Gradient",
    "Interpolator",
    "lerp",
    "step",
    "InvalidStopOperation",
    "EmptyGradientError",
    "__version__",
]
