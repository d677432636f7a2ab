from __future__ import annotations
from typing import ClassVar, Tuple, TYPE_CHECKING
from ..types.color_types import ColorSpace
from .color_base import ComponentBase, channel_property

if TYPE_CHECKING:
    from .rgb import RGB


class CMYK(ComponentBase):
    __slots__ = ()

    num_channels:  ClassVar[int] = 4
    mode:          ClassVar[ColorSpace] = "cmyk"
    channel_names: ClassVar[Tuple[str, ...]] = ("c", "m", "y", "k")

    c = channel_property(0, "Cyan channel in [0, 1].")
    m = channel_property(1, "Magenta channel in [0, 1].")
    y = channel_property(2, "Yellow channel in [0, 1].")
    k = channel_property(3, "Black key channel in [0, 1].")

    def to_rgb(self) -> RGB:
        from ..conversions.wrapper import cmyk_to_rgb
        return cmyk_to_rgb(self)
