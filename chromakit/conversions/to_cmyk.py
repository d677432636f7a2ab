from typing import Tuple

from ..utils import clip_unit


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Naive RGB to CMYK: complement each channel, pull the common part out
    as the black key.
    """
    c = 1.0 - r
    m = 1.0 - g
    y = 1.0 - b
    k = min(c, m, y)

    return (
        clip_unit(c - k),
        clip_unit(m - k),
        clip_unit(y - k),
        clip_unit(k),
    )
