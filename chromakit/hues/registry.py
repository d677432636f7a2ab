"""
Registry of named hues with nearest-hue lookup on the color wheel.

The registry starts seeded with the twelve standard hues. Custom hues can be
registered at any time; lookups measure circular distance so that hues near
0 and near 1 are neighbours.

Examples
--------
>>> registry = HueRegistry()
>>> registry.find(130 / 360).name
'green'
>>> _ = registry.register_hue("jade", 135 / 360)
>>> registry.find(130 / 360).name
'jade'
>>> registry.find(130 / 360, primary_only=True).name
'green'
"""
from __future__ import annotations
import logging
import threading
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

import numpy as np

from ..types import thresholds
from ..utils import circular_distance, value_or_default, wrap_unit
from .named_hue import NamedHue
from .standard import STANDARD_HUES

logger = logging.getLogger(__name__)


def _key(name: object) -> object:
    # StandardHue members hash by member name, not by value
    return name.value if isinstance(name, Enum) else name


def _nearest(candidates: Sequence[NamedHue], hue: float) -> Optional[NamedHue]:
    """Closest candidate by circular distance; ties go to the earliest one."""
    if not candidates:
        return None
    hues = np.fromiter((c.hue for c in candidates), dtype=np.float64, count=len(candidates))
    d = np.abs(hues - hue) % 1.0
    dist = np.minimum(d, 1.0 - d)
    return candidates[int(np.argmin(dist))]


class HueRegistry:
    """
    Catalog mapping names to hue positions, with a primary subset.

    All reads and writes hold an internal lock, so one registry can be
    shared between threads.

    Args:
        hues: Initial hues. Defaults to the twelve standard hues.
    """

    def __init__(self, hues: Optional[Iterable[NamedHue]] = None):
        self._lock = threading.RLock()
        self._seed = tuple(value_or_default(hues, STANDARD_HUES))
        self._named: Dict[str, NamedHue] = {}
        # keyed by name so re-registering a primary hue replaces the old entry
        self._primary: Dict[str, NamedHue] = {}
        for named_hue in self._seed:
            self.register(named_hue)

    # ------------------ MUTATION ------------------
    def register(self, named_hue: NamedHue) -> NamedHue:
        """
        Register ``named_hue``, replacing any hue under the same name.

        The hue is wrapped into [0, 1) before it is stored. Returns the stored
        value.
        """
        stored = NamedHue(_key(named_hue.name), wrap_unit(named_hue.hue), bool(named_hue.primary))
        with self._lock:
            previous = self._named.get(stored.name)
            self._named[stored.name] = stored
            if stored.primary:
                if previous is not None and previous.primary and previous != stored:
                    logger.info("Replacing primary hue %s with %s", previous, stored)
                self._primary[stored.name] = stored
            else:
                self._primary.pop(stored.name, None)
        logger.debug("Registered %s (primary=%s)", stored, stored.primary)
        return stored

    def register_hue(self, name: str, hue: float, primary: bool = False) -> NamedHue:
        """Register ``hue`` under ``name``."""
        return self.register(NamedHue(name, hue, primary))

    def reset(self) -> None:
        """Drop custom hues and restore the initial seed."""
        with self._lock:
            self._named.clear()
            self._primary.clear()
            for named_hue in self._seed:
                self.register(named_hue)

    # ------------------ QUERIES ------------------
    def hue_for_name(self, name: str | Enum) -> Optional[NamedHue]:
        with self._lock:
            return self._named.get(_key(name))

    def find(self, hue: float, primary_only: bool = False) -> Optional[NamedHue]:
        """
        Find the registered hue nearest to ``hue``.

        Args:
            hue: Hue as a fraction of the wheel; wrapped into [0, 1).
            primary_only: Search only the primary hues.

        Returns:
            The nearest NamedHue, or None if there is nothing to search.
        """
        query = wrap_unit(hue)
        with self._lock:
            source = self._primary if primary_only else self._named
            candidates = list(source.values())
        return _nearest(candidates, query)

    def is_primary(self, hue: float, variance: Optional[float] = None) -> bool:
        """
        Check whether ``hue`` lies strictly within ``variance`` of its nearest
        primary hue, measured around the wheel.
        """
        variance = value_or_default(variance, thresholds.PRIMARY_VARIANCE)
        closest = self.find(hue, primary_only=True)
        if closest is None:
            return False
        return circular_distance(closest.hue, wrap_unit(hue)) < variance

    def names(self) -> List[str]:
        with self._lock:
            return list(self._named)

    def primary_hues(self) -> List[NamedHue]:
        with self._lock:
            return list(self._primary.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._named)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return _key(name) in self._named

    def __iter__(self) -> Iterator[NamedHue]:
        with self._lock:
            return iter(list(self._named.values()))

    def __repr__(self) -> str:
        return f"HueRegistry(hues={len(self)}, primary={len(self.primary_hues())})"


_default_registry: Optional[HueRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> HueRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = HueRegistry()
    return _default_registry
