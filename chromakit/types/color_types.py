from __future__ import annotations
from typing import Literal, Tuple, Union

UnitTriple = Tuple[float, float, float]
UnitQuad = Tuple[float, float, float, float]
ComponentValue = Union[UnitTriple, UnitQuad]
ColorSpace = Literal["rgb", "hsv", "cmyk"]
COLOR_SPACES = ("rgb", "hsv", "cmyk")


def normalize_space(color_space: str) -> ColorSpace:
    """
    Lower-case and validate a color space name.

    Args:
        color_space: Color space string, e.g. "RGB" or "hsv"
    Returns:
        The canonical lower-case name
    Raises:
        ValueError: if the space is not one of rgb, hsv, cmyk
    """
    space = color_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {color_space}")
    return space  # type: ignore[return-value]
