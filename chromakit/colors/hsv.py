from __future__ import annotations
from typing import ClassVar, Optional, Tuple, TYPE_CHECKING
from ..types.color_types import ColorSpace
from ..types import thresholds
from ..utils import value_or_default
from .color_base import ComponentBase, channel_property

if TYPE_CHECKING:
    from .rgb import RGB
    from ..hues.registry import HueRegistry


class HSV(ComponentBase):
    """
    Hue, saturation and brightness, all as unit floats.

    Hue is a fraction of the color wheel, not degrees: 0.5 is 180°.
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    mode:          ClassVar[ColorSpace] = "hsv"
    channel_names: ClassVar[Tuple[str, ...]] = ("h", "s", "v")

    h = channel_property(0, "Hue as a fraction of the color wheel.")
    s = channel_property(1, "Saturation in [0, 1].")
    v = channel_property(2, "Brightness in [0, 1].")

    def to_rgb(self) -> RGB:
        from ..conversions.wrapper import hsv_to_rgb
        return hsv_to_rgb(self)

    def is_grey(self, grey_threshold: Optional[float] = None) -> bool:
        grey_threshold = value_or_default(grey_threshold, thresholds.GREY_THRESHOLD)
        return self.s < grey_threshold

    def is_primary(
        self,
        variance: Optional[float] = None,
        registry: Optional[HueRegistry] = None,
    ) -> bool:
        """
        Check whether the hue sits within ``variance`` of a registered primary hue.

        Args:
            variance: Allowed tolerance. Defaults to ``thresholds.PRIMARY_VARIANCE``.
            registry: Registry to consult. Defaults to the process-wide one.
        """
        from ..hues.registry import default_registry
        if registry is None:
            registry = default_registry()
        return registry.is_primary(self.h, variance)
