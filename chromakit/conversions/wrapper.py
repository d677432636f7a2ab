from __future__ import annotations
from typing import Callable, Dict, Tuple

from ..colors import component_classes
from ..colors.color_base import ComponentBase
from ..colors.rgb import RGB
from ..colors.hsv import HSV
from ..colors.cmyk import CMYK
from ..types.color_types import ColorSpace, normalize_space

from .to_hsv import unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, cmyk_to_unit_rgb
from .to_cmyk import unit_rgb_to_cmyk


def rgb_to_hsv(rgb: RGB) -> HSV:
    return HSV(*unit_rgb_to_hsv(*rgb.value))


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    return CMYK(*unit_rgb_to_cmyk(*rgb.value))


def hsv_to_rgb(hsv: HSV) -> RGB:
    return RGB(*hsv_to_unit_rgb(*hsv.value))


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    return RGB(*cmyk_to_unit_rgb(*cmyk.value))


# CMYK <-> HSV has no direct formula and always goes through RGB
def hsv_to_cmyk(hsv: HSV) -> CMYK:
    return rgb_to_cmyk(hsv_to_rgb(hsv))


def cmyk_to_hsv(cmyk: CMYK) -> HSV:
    return rgb_to_hsv(cmyk_to_rgb(cmyk))


CONVERT_COMPONENT: Dict[Tuple[str, str], Callable[..., ComponentBase]] = {
    ("rgb", "hsv"): rgb_to_hsv,
    ("rgb", "cmyk"): rgb_to_cmyk,
    ("hsv", "rgb"): hsv_to_rgb,
    ("hsv", "cmyk"): hsv_to_cmyk,
    ("cmyk", "rgb"): cmyk_to_rgb,
    ("cmyk", "hsv"): cmyk_to_hsv,
}


def convert_component(color: ComponentBase, to_space: ColorSpace) -> ComponentBase:
    """Convert a component holder into ``to_space``; same space returns it unchanged."""
    ts = normalize_space(to_space)
    if color.mode == ts:
        return color
    return CONVERT_COMPONENT[(color.mode, ts)](color)


def convert(
    color: Tuple[float, ...],
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Tuple[float, ...]:
    """
    Convert a plain tuple of unit floats between color spaces.

    Input channels are clipped to [0, 1] on the way in.

    Raises:
        ValueError: for an unknown space or a wrong channel count
    """
    fs, ts = normalize_space(from_space), normalize_space(to_space)
    source = component_classes[fs](*color)
    return convert_component(source, ts).value
