import math
from typing import Tuple

from .to_hsv import INV_60_DEGREES


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV (hue as a fraction of the wheel) to unit RGB.

    Zero saturation is achromatic and yields (v, v, v) whatever the hue.
    Sector indices outside 0..4, including 6 for h == 1.0, use the
    sector 5 assignment.
    """
    if s == 0.0:
        return v, v, v

    h = h / INV_60_DEGREES
    i = math.floor(h)
    f = h - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Convert CMYK to unit RGB; each ink plus key saturates at 1."""
    r = 1.0 - min(1.0, c + k)
    g = 1.0 - min(1.0, m + k)
    b = 1.0 - min(1.0, y + k)
    return r, g, b
