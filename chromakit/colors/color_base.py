from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, cast
from ..types.color_types import ColorSpace, ComponentValue
from ..utils import clip_unit, get_dimension


class ComponentBase:
    """
    Immutable holder for the unit-float channels of one color space.

    Every channel is clipped into [0, 1] on construction; out-of-range input
    is saturated, never rejected.
    """
    __slots__ = ('_value', '_is_frozen')

    num_channels: ClassVar[int] = 3
    mode:          ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *channels: Any) -> None:
        # Accept both RGB(r, g, b) and RGB((r, g, b))
        if len(channels) == 1 and get_dimension(channels[0]) > 1:
            channels = tuple(channels[0])

        if len(channels) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got {len(channels)}"
            )

        self._value = tuple(clip_unit(c) for c in channels)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ComponentValue:
        return cast(ComponentValue, self._value)

    def convert(self, to_space: ColorSpace) -> ComponentBase:
        """Convert this value into another color space."""
        from ..conversions.wrapper import convert_component
        return convert_component(self, to_space)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> float:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        channels = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({channels})"

    def __reduce__(self):
        return (self.__class__, self._value)


def channel_property(index: int, doc: str) -> property:
    """Build a read-only property returning one channel of a component value."""
    def getter(self: ComponentBase) -> float:
        return self._value[index]
    return property(getter, doc=doc)
