from __future__ import annotations
from typing import Optional, Union, TYPE_CHECKING

import numpy as np

from ..conversions.packing import (
    ARGB_HEX_DIGITS,
    argb_to_rgba,
    hex_to_rgb,
    hex_to_rgba,
    rgba_to_argb,
    rgba_to_hex,
)
from ..types import thresholds
from ..types.color_types import ColorSpace, normalize_space
from ..utils import clip_unit
from .color_base import ComponentBase
from .cmyk import CMYK
from .hsv import HSV
from .rgb import RGB

if TYPE_CHECKING:
    from ..hues.registry import HueRegistry

_LUMINANCE_WEIGHTS = np.array(thresholds.LUMINANCE_WEIGHTS, dtype=np.float64)


class Color:
    """
    A color held in RGB, HSV and CMYK at once, plus alpha.

    Whichever space a color is built from, the other two are derived
    immediately, so the three always describe the same color.

    Usage
    -----
    >>> red = Color.from_rgb(RGB(1.0, 0.0, 0.0))
    >>> red.hsv
    HSV(h=0.0, s=1.0, v=1.0)
    >>> Color.from_hex("#FF8000").to_hex()
    'FFFF8000'
    >>> Color.from_hex("80") is None
    True
    """
    __slots__ = ('_rgb', '_hsv', '_cmyk', '_alpha')

    def __setattr__(self, name, value):
        if hasattr(self, '_alpha'):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, component: ComponentBase, alpha: float = 1.0) -> None:
        """Build from one RGB, HSV or CMYK value; the other two are derived."""
        if isinstance(component, RGB):
            rgb = component
            hsv, cmyk = rgb.to_hsv(), rgb.to_cmyk()
        elif isinstance(component, HSV):
            hsv = component
            rgb = hsv.to_rgb()
            cmyk = rgb.to_cmyk()
        elif isinstance(component, CMYK):
            cmyk = component
            rgb = cmyk.to_rgb()
            hsv = rgb.to_hsv()
        else:
            raise TypeError(f"Unsupported component type: {type(component).__name__}")
        self._assign(rgb, hsv, cmyk, alpha)

    def _assign(self, rgb: RGB, hsv: HSV, cmyk: CMYK, alpha: float) -> None:
        # _alpha goes last: once it is set the instance is frozen
        self._rgb = rgb
        self._hsv = hsv
        self._cmyk = cmyk
        self._alpha = clip_unit(alpha)

    @classmethod
    def _from_spaces(cls, rgb: RGB, hsv: HSV, cmyk: CMYK, alpha: float) -> Color:
        # spaces must already agree; only used to copy an existing Color
        color = object.__new__(cls)
        color._assign(rgb, hsv, cmyk, alpha)
        return color

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, rgb: RGB, alpha: float = 1.0) -> Color:
        if not isinstance(rgb, RGB):
            raise TypeError(f"Expected RGB, got {type(rgb).__name__}")
        return cls(rgb, alpha)

    @classmethod
    def from_hsv(cls, hsv: HSV, alpha: float = 1.0) -> Color:
        if not isinstance(hsv, HSV):
            raise TypeError(f"Expected HSV, got {type(hsv).__name__}")
        return cls(hsv, alpha)

    @classmethod
    def from_cmyk(cls, cmyk: CMYK, alpha: float = 1.0) -> Color:
        if not isinstance(cmyk, CMYK):
            raise TypeError(f"Expected CMYK, got {type(cmyk).__name__}")
        return cls(cmyk, alpha)

    @classmethod
    def from_component(cls, component: ComponentBase, alpha: float = 1.0) -> Color:
        """Build from any of RGB, HSV or CMYK."""
        return cls(component, alpha)

    @classmethod
    def from_argb(cls, argb: int) -> Color:
        """Build from a packed 32-bit ARGB integer, alpha in the highest byte."""
        decoded = argb_to_rgba(argb)
        return cls.from_rgb(decoded.rgb, decoded.alpha)

    @classmethod
    def from_hex(cls, text: str) -> Optional[Color]:
        """
        Build from ``RRGGBB`` or ``AARRGGBB`` hex digits.

        Strings shorter than eight characters are read as RGB with full
        opacity; longer ones as ARGB. Returns None when the string is too
        short or not hexadecimal.
        """
        if len(text) < ARGB_HEX_DIGITS:
            rgb = hex_to_rgb(text)
            if rgb is None:
                return None
            return cls.from_rgb(rgb, 1.0)

        decoded = hex_to_rgba(text)
        if decoded is None:
            return None
        return cls.from_rgb(decoded.rgb, decoded.alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgb(self) -> RGB:
        return self._rgb

    @property
    def hsv(self) -> HSV:
        return self._hsv

    @property
    def cmyk(self) -> CMYK:
        return self._cmyk

    @property
    def alpha(self) -> float:
        return self._alpha

    def get(self, space: ColorSpace) -> Union[RGB, HSV, CMYK]:
        """Return the representation in ``space``."""
        return {"rgb": self._rgb, "hsv": self._hsv, "cmyk": self._cmyk}[normalize_space(space)]

    # ------------------ CLASSIFICATION ------------------
    def is_black(self, black_point: Optional[float] = None) -> bool:
        return self._rgb.is_black(black_point)

    def is_white(self, white_point: Optional[float] = None) -> bool:
        return self._rgb.is_white(white_point)

    def is_grey(self, grey_threshold: Optional[float] = None) -> bool:
        return self._hsv.is_grey(grey_threshold)

    def is_primary(
        self,
        variance: Optional[float] = None,
        registry: Optional[HueRegistry] = None,
    ) -> bool:
        return self._hsv.is_primary(variance, registry)

    def luminance(self) -> float:
        """Relative luminance assuming sRGB primaries. Alpha is ignored."""
        return float(np.dot(_LUMINANCE_WEIGHTS, self._rgb.value))

    # ------------------ ADJUSTMENTS ------------------
    def darken(self, step: float) -> Color:
        """Return a copy with brightness lowered by ``step`` (0.1 -> 10%)."""
        h, s, v = self._hsv.value
        return Color.from_hsv(HSV(h, s, v - clip_unit(step)), self._alpha)

    def lighten(self, step: float) -> Color:
        """Return a copy with brightness raised by ``step``."""
        h, s, v = self._hsv.value
        return Color.from_hsv(HSV(h, s, v + clip_unit(step)), self._alpha)

    def with_alpha(self, alpha: float) -> Color:
        return type(self)._from_spaces(self._rgb, self._hsv, self._cmyk, alpha)

    # ------------------ ENCODING ------------------
    def to_argb(self) -> int:
        return rgba_to_argb(self._rgb, self._alpha)

    def to_hex(self, alpha: bool = True) -> str:
        return rgba_to_hex(self._rgb, self._alpha, with_alpha=alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            self._rgb == other._rgb
            and self._hsv == other._hsv
            and self._cmyk == other._cmyk
            and self._alpha == other._alpha
        )

    def __hash__(self) -> int:
        return hash((self._rgb, self._hsv, self._cmyk, self._alpha))

    def __repr__(self) -> str:
        return f"Color(rgb={self._rgb!r}, hsv={self._hsv!r}, cmyk={self._cmyk!r}, alpha={self._alpha!r})"
