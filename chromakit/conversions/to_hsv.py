from typing import Tuple

from ..utils import clip_unit, wrap_unit

# Width of one hue sector as a fraction of the wheel
INV_60_DEGREES = 60.0 / 360.0


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV with hue as a fraction of the wheel.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 1)
        s ∈ [0, 1]
        v ∈ [0, 1]

    When several channels share the maximum, the sector is chosen by
    checking R first, then G, then B.
    """
    v = max(r, g, b)
    d = v - min(r, g, b)

    h = 0.0
    s = 0.0
    if v != 0.0:
        s = d / v

    if s != 0.0:
        if r == v:
            h = (g - b) / d
        elif g == v:
            h = 2.0 + (b - r) / d
        else:
            h = 4.0 + (r - g) / d

    # negative red-sector hues wrap; a tiny negative can round up to 1.0
    h = wrap_unit(h * INV_60_DEGREES)

    return clip_unit(h), clip_unit(s), clip_unit(v)
