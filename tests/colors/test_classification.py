from chromakit.colors import RGB, HSV
from chromakit.colors.color import Color
from chromakit.hues import HueRegistry
import pytest


def grey(level: int) -> Color:
    return Color.from_rgb(RGB(level / 255, level / 255, level / 255))


def test_black_boundary():
    assert grey(10).is_black()
    assert not grey(30).is_black()
    assert grey(0).is_black()


def test_black_requires_equal_channels():
    assert not Color.from_rgb(RGB(0.0, 0.0, 0.01)).is_black()


def test_black_point_override():
    assert grey(30).is_black(black_point=0.2)


def test_white_boundary():
    assert grey(255).is_white()
    assert not grey(250).is_white()


def test_white_point_override():
    assert grey(250).is_white(white_point=0.95)
    assert not Color.from_rgb(RGB(1.0, 1.0, 0.99)).is_white(white_point=0.95)


def test_grey():
    assert grey(128).is_grey()
    assert not Color.from_rgb(RGB(0.5, 0.4, 0.4)).is_grey()
    # s == 0.2 / 0.5 == 0.4
    assert Color.from_rgb(RGB(0.5, 0.4, 0.3)).is_grey(grey_threshold=0.5)


def test_primary(registry):
    orange = Color.from_hsv(HSV(30 / 360, 1.0, 1.0))
    teal = Color.from_hsv(HSV(150 / 360, 1.0, 1.0))

    assert orange.is_primary(registry=registry)
    assert not teal.is_primary(registry=registry)


def test_primary_uses_default_registry():
    assert Color.from_hsv(HSV(30 / 360, 1.0, 1.0)).is_primary()
    assert not Color.from_hsv(HSV(150 / 360, 1.0, 1.0)).is_primary()


def test_primary_variance_override(registry):
    near_teal = Color.from_hsv(HSV(135 / 360, 1.0, 1.0))
    assert not near_teal.is_primary(registry=registry)
    assert near_teal.is_primary(variance=0.05, registry=registry)


def test_primary_with_custom_registry():
    registry = HueRegistry(hues=[])
    registry.register_hue("teal", 150 / 360, primary=True)
    assert Color.from_hsv(HSV(150 / 360, 1.0, 1.0)).is_primary(registry=registry)


def test_component_predicates():
    assert RGB(0.05, 0.05, 0.05).is_black()
    assert RGB(1.0, 1.0, 1.0).is_white()
    assert HSV(0.3, 0.005, 0.5).is_grey()
    assert HSV(0.0, 1.0, 1.0).is_primary()


def test_luminance():
    assert Color.from_rgb(RGB(1.0, 1.0, 1.0)).luminance() == pytest.approx(1.0, abs=1e-12)
    assert Color.from_rgb(RGB(0.0, 0.0, 0.0)).luminance() == 0.0
    assert Color.from_rgb(RGB(1.0, 0.0, 0.0)).luminance() == pytest.approx(0.2126, abs=1e-12)
    assert Color.from_rgb(RGB(0.0, 1.0, 0.0)).luminance() == pytest.approx(0.7152, abs=1e-12)
    assert Color.from_rgb(RGB(0.0, 0.0, 1.0)).luminance() == pytest.approx(0.0722, abs=1e-12)


def test_luminance_ignores_alpha():
    rgb = RGB(0.2, 0.4, 0.6)
    assert Color.from_rgb(rgb, 0.1).luminance() == Color.from_rgb(rgb, 1.0).luminance()
