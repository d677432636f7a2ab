from __future__ import annotations
from typing import ClassVar, Optional, Tuple, TYPE_CHECKING
from ..types.color_types import ColorSpace
from ..types import thresholds
from ..utils import value_or_default
from .color_base import ComponentBase, channel_property

if TYPE_CHECKING:
    from .hsv import HSV
    from .cmyk import CMYK


class RGB(ComponentBase):
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = "rgb"
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")

    r = channel_property(0, "Red channel in [0, 1].")
    g = channel_property(1, "Green channel in [0, 1].")
    b = channel_property(2, "Blue channel in [0, 1].")

    def to_hsv(self) -> HSV:
        from ..conversions.wrapper import rgb_to_hsv
        return rgb_to_hsv(self)

    def to_cmyk(self) -> CMYK:
        from ..conversions.wrapper import rgb_to_cmyk
        return rgb_to_cmyk(self)

    @property
    def is_achromatic(self) -> bool:
        """All three channels are equal."""
        return self.r == self.g == self.b

    def is_black(self, black_point: Optional[float] = None) -> bool:
        """
        Check whether this holder is close enough to black to be considered black.

        Args:
            black_point: Maximum channel value of a black color.
                Defaults to ``thresholds.BLACK_POINT``.
        """
        black_point = value_or_default(black_point, thresholds.BLACK_POINT)
        return self.r <= black_point and self.is_achromatic

    def is_white(self, white_point: Optional[float] = None) -> bool:
        """
        Check whether this holder is close enough to white to be considered white.

        With the default white point of 1.0 only exact white qualifies.
        """
        white_point = value_or_default(white_point, thresholds.WHITE_POINT)
        return self.r >= white_point and self.is_achromatic


BLACK = RGB(0.0, 0.0, 0.0)
WHITE = RGB(1.0, 1.0, 1.0)
