"""
Chromakit Color Classes
=======================

Immutable holders for RGB, HSV and CMYK channels. Every channel is a unit
float, clipped into [0, 1] at construction.

Usage
-----
>>> from chromakit.colors import RGB
>>> orange = RGB(1.0, 0.5, 0.0)
>>> orange.to_hsv()
HSV(h=0.08333333333333333, s=1.0, v=1.0)
>>> RGB(1.2, -0.3, 0.5)
RGB(r=1.0, g=0.0, b=0.5)

Component Classes
-----------------
    - RGB: red, green, blue
    - HSV: hue (fraction of the wheel), saturation, brightness
    - CMYK: cyan, magenta, yellow, black key

Notes
-----
- The unified ``Color`` lives in ``chromakit.colors.color`` and is not
  imported here, keeping this package free of the codec dependency.
"""

from .color_base import ComponentBase
from .rgb import RGB, BLACK, WHITE
from .hsv import HSV
from .cmyk import CMYK

component_classes = {cls.mode: cls for cls in (RGB, HSV, CMYK)}

__all__ = ['ComponentBase', 'RGB', 'HSV', 'CMYK', 'BLACK', 'WHITE', 'component_classes']
