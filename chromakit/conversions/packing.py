"""Packed 32-bit ARGB and hex string codecs."""
from __future__ import annotations
from dataclasses import dataclass
import logging
import re
from typing import Optional

from ..colors.rgb import RGB
from ..utils import clip_unit

logger = logging.getLogger(__name__)

# Largest 8-bit channel value, maps to 1.0
MAX_8BIT = 255.0

RGB_HEX_DIGITS = 6
ARGB_HEX_DIGITS = 8

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


@dataclass(frozen=True)
class DecodedColor:
    """RGB channels plus alpha decoded from a packed or hex value."""
    rgb: RGB
    alpha: float


def argb_to_rgba(value: int) -> DecodedColor:
    """Unpack a 32-bit ARGB integer; bits above 32 are ignored."""
    value = int(value) & 0xFFFFFFFF
    r = ((value >> 16) & 0xFF) / MAX_8BIT
    g = ((value >> 8) & 0xFF) / MAX_8BIT
    b = (value & 0xFF) / MAX_8BIT
    alpha = (value >> 24) / MAX_8BIT
    return DecodedColor(RGB(r, g, b), alpha)


def _to_byte(channel: float) -> int:
    return int(round(clip_unit(channel) * MAX_8BIT))


def rgba_to_argb(rgb: RGB, alpha: float = 1.0) -> int:
    """Pack RGB and alpha into a 32-bit ARGB integer, rounding to the nearest byte."""
    return (
        (_to_byte(alpha) << 24)
        | (_to_byte(rgb.r) << 16)
        | (_to_byte(rgb.g) << 8)
        | _to_byte(rgb.b)
    )


def _clip_from_end(text: str, limit: int) -> str:
    """Keep at most the last ``limit`` characters."""
    return text[-limit:] if len(text) > limit else text


def _parse_hex(text: str, digits: int) -> Optional[int]:
    if len(text) < digits:
        logger.debug("Hex string %r is shorter than %d digits", text, digits)
        return None
    tail = _clip_from_end(text, digits)
    if not _HEX_RE.fullmatch(tail):
        logger.debug("Hex string %r contains non-hex characters", text)
        return None
    return int(tail, 16)


def hex_to_rgb(text: str) -> Optional[RGB]:
    """
    Decode ``RRGGBB`` into RGB.

    Longer strings use their trailing six digits, so ``"#505050"`` and
    ``"60505050"`` both decode like ``"505050"``. Returns None for fewer
    than six characters or non-hex digits.
    """
    value = _parse_hex(text, RGB_HEX_DIGITS)
    if value is None:
        return None
    return argb_to_rgba(value).rgb


def hex_to_rgba(text: str) -> Optional[DecodedColor]:
    """
    Decode ``AARRGGBB`` into RGB plus alpha.

    Longer strings use their trailing eight digits. Returns None for fewer
    than eight characters or non-hex digits.
    """
    value = _parse_hex(text, ARGB_HEX_DIGITS)
    if value is None:
        return None
    return argb_to_rgba(value)


def rgba_to_hex(rgb: RGB, alpha: float = 1.0, *, with_alpha: bool = True) -> str:
    """Render as upper-case ``AARRGGBB``, or ``RRGGBB`` when ``with_alpha`` is False."""
    packed = rgba_to_argb(rgb, alpha)
    if with_alpha:
        return f"{packed:08X}"
    return f"{packed & 0xFFFFFF:06X}"
