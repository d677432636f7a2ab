"""
Chromakit Color Space Conversions
=================================

Conversions between RGB, HSV and CMYK on unit floats, plus packed ARGB and
hex codecs.

Conversion Functions
-------------------

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
        Hue comes back as a fraction of the wheel in [0, 1)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
        Six-sector reconstruction; zero saturation yields (v, v, v)

RGB ↔ CMYK:
    unit_rgb_to_cmyk(r, g, b)
    cmyk_to_unit_rgb(c, m, y, k)

CMYK ↔ HSV has no direct formula and goes through RGB.

High-Level API
-------------
    convert(color, from_space, to_space)
        Tuple-in, tuple-out converter between any two of rgb, hsv, cmyk
    convert_component(component, to_space)
        Same, on RGB / HSV / CMYK holders

Codecs
------
    argb_to_rgba(value) / rgba_to_argb(rgb, alpha)
    hex_to_rgb(text) / hex_to_rgba(text) / rgba_to_hex(rgb, alpha)

Examples
--------
>>> from chromakit.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> unit_rgb_to_hsv(0.0, 1.0, 0.0)
(0.3333333333333333, 1.0, 1.0)
>>> hsv_to_unit_rgb(0.0, 0.0, 0.4)
(0.4, 0.4, 0.4)
"""

from .to_hsv import unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, cmyk_to_unit_rgb
from .to_cmyk import unit_rgb_to_cmyk

from .wrapper import (
    convert,
    convert_component,
    rgb_to_hsv,
    rgb_to_cmyk,
    hsv_to_rgb,
    cmyk_to_rgb,
    hsv_to_cmyk,
    cmyk_to_hsv,
)

from .packing import (
    MAX_8BIT,
    DecodedColor,
    argb_to_rgba,
    rgba_to_argb,
    hex_to_rgb,
    hex_to_rgba,
    rgba_to_hex,
)

__all__ = [
    # Scalar functions
    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'unit_rgb_to_cmyk',
    'cmyk_to_unit_rgb',

    # Component-level
    'convert',
    'convert_component',
    'rgb_to_hsv',
    'rgb_to_cmyk',
    'hsv_to_rgb',
    'cmyk_to_rgb',
    'hsv_to_cmyk',
    'cmyk_to_hsv',

    # Codecs
    'MAX_8BIT',
    'DecodedColor',
    'argb_to_rgba',
    'rgba_to_argb',
    'hex_to_rgb',
    'hex_to_rgba',
    'rgba_to_hex',
]
