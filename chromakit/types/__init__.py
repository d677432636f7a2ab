from .color_types import (
    ColorSpace,
    ComponentValue,
    UnitTriple,
    UnitQuad,
    COLOR_SPACES,
    normalize_space,
)
from . import thresholds

__all__ = [
    'ColorSpace',
    'ComponentValue',
    'UnitTriple',
    'UnitQuad',
    'COLOR_SPACES',
    'normalize_space',
    'thresholds',
]
