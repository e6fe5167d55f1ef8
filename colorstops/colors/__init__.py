"""
Color values
============

:class:`Color` is the four-channel (r, g, b, a) value stored in gradient
stops and returned by gradient queries. It is immutable and stores channels
as given, without clamping.

Usage
-----
>>> from colorstops.colors import Color
>>>
>>> white = Color(255, 255, 255)
>>> white.a
1.0
>>> Color.coerce({"r": 0, "g": 0, "b": 0, "a": 0.5}).as_tuple()
(0, 0, 0, 0.5)
>>> white.with_alpha(0.25)
Color(r=255, g=255, b=255, a=0.25)
"""

from .color import Color

__all__ = ["Color"]
