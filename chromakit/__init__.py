"""Chromakit: RGB / HSV / CMYK color values, conversions and named hues."""

from .colors import ComponentBase, RGB, HSV, CMYK
from .colors.color import Color
from .conversions import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_cmyk,
    cmyk_to_unit_rgb,
    convert,
    convert_component,
    DecodedColor,
    argb_to_rgba,
    rgba_to_argb,
    hex_to_rgb,
    hex_to_rgba,
    rgba_to_hex,
)
from .hues import NamedHue, StandardHue, STANDARD_HUES, HueRegistry, default_registry

__version__ = "0.1.0"

__all__ = [
    # color values
    "ComponentBase",
    "RGB",
    "HSV",
    "CMYK",
    "Color",
    # conversions
    "unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "unit_rgb_to_cmyk",
    "cmyk_to_unit_rgb",
    "convert",
    "convert_component",
    # codecs
    "DecodedColor",
    "argb_to_rgba",
    "rgba_to_argb",
    "hex_to_rgb",
    "hex_to_rgba",
    "rgba_to_hex",
    # named hues
    "NamedHue",
    "StandardHue",
    "STANDARD_HUES",
    "HueRegistry",
    "default_registry",
]
