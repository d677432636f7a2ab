import pytest

from chromakit.hues import HueRegistry


@pytest.fixture
def registry() -> HueRegistry:
    """A fresh registry seeded with the standard hues."""
    return HueRegistry()


@pytest.fixture
def empty_registry() -> HueRegistry:
    return HueRegistry(hues=[])
