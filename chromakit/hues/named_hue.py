from __future__ import annotations
from dataclasses import dataclass

from ..types.thresholds import HUE_360


@dataclass(frozen=True)
class NamedHue:
    """A hue position on the color wheel associated with a name."""
    name: str
    # Fraction of the color wheel, 0.5 == 180 degrees
    hue: float
    primary: bool = False

    @property
    def degrees(self) -> float:
        return self.hue * HUE_360

    def __str__(self) -> str:
        return f"NamedHue, name: {self.name}, at {self.degrees} degrees"
