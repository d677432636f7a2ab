"""
Named hues
==========

A registry of hues positioned on the 0..1 color wheel, pre-seeded with
twelve standard hues at 30° steps (seven of them primary), supporting
custom registration and nearest-hue search.
"""

from .named_hue import NamedHue
from .standard import StandardHue, STANDARD_HUES
from .registry import HueRegistry, default_registry

__all__ = [
    'NamedHue',
    'StandardHue',
    'STANDARD_HUES',
    'HueRegistry',
    'default_registry',
]
