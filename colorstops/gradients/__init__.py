from .stop_list import Stop, StopList
from .interpolators import Interpolator, lerp, step
from .gradient import Gradient

__all__ = [
    "Stop",
    "StopList",
    "Interpolator",
    "lerp",
    "step",
    "Gradient",
]
