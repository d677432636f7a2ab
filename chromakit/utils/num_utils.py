from typing import Any, Optional, TypeVar
from collections.abc import Sized
import math

from boundednumbers.functions import clamp

T = TypeVar('T')


def clip_unit(value: float) -> float:
    """Clip a value into the color component range [0, 1]."""
    return float(clamp(float(value), 0.0, 1.0))


def wrap_unit(value: float) -> float:
    """Wrap a value onto the unit circle [0, 1). Non-finite values map to 0."""
    if not math.isfinite(value):
        return 0.0
    wrapped = math.fmod(float(value), 1.0)
    if wrapped < 0.0:
        wrapped += 1.0
    # fmod of a tiny negative can round back up to exactly 1.0
    if wrapped >= 1.0:
        wrapped = 0.0
    return wrapped


def circular_distance(a: float, b: float) -> float:
    """Shortest distance between two points on the unit circle."""
    d = abs(a - b) % 1.0
    return min(d, 1.0 - d)


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1
