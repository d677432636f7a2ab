from chromakit.colors import RGB, HSV, CMYK, BLACK, WHITE
import pickle
import pytest


def test_channels_are_clipped():
    assert RGB(1.5, -0.2, 0.5).value == (1.0, 0.0, 0.5)
    assert HSV(-1.0, 2.0, 0.25).value == (0.0, 1.0, 0.25)
    assert CMYK(0.1, 1.01, -0.01, 3).value == (0.1, 1.0, 0.0, 1.0)


def test_in_range_values_untouched():
    rgb = RGB(0.1, 0.2, 0.3)
    assert rgb.value == (0.1, 0.2, 0.3)


def test_accepts_tuple_argument():
    assert RGB((0.1, 0.2, 0.3)) == RGB(0.1, 0.2, 0.3)
    assert CMYK([0.0, 0.0, 0.0, 1.0]) == CMYK(0.0, 0.0, 0.0, 1.0)


def test_wrong_channel_count():
    with pytest.raises(ValueError):
        RGB(0.1, 0.2)
    with pytest.raises(ValueError):
        CMYK(0.1, 0.2, 0.3)


def test_channel_properties():
    rgb = RGB(0.1, 0.2, 0.3)
    assert (rgb.r, rgb.g, rgb.b) == (0.1, 0.2, 0.3)
    hsv = HSV(0.5, 0.6, 0.7)
    assert (hsv.h, hsv.s, hsv.v) == (0.5, 0.6, 0.7)
    cmyk = CMYK(0.1, 0.2, 0.3, 0.4)
    assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (0.1, 0.2, 0.3, 0.4)


def test_unpacking_and_indexing():
    r, g, b = RGB(0.1, 0.2, 0.3)
    assert (r, g, b) == (0.1, 0.2, 0.3)
    assert len(CMYK(0, 0, 0, 0)) == 4
    assert HSV(0.5, 0.6, 0.7)[2] == 0.7


def test_equality_is_exact():
    assert RGB(0.1, 0.2, 0.3) == RGB(0.1, 0.2, 0.3)
    assert RGB(0.1, 0.2, 0.3) != RGB(0.1, 0.2, 0.3 + 1e-12)


def test_different_spaces_never_equal():
    assert RGB(0.0, 0.0, 0.0) != HSV(0.0, 0.0, 0.0)


def test_hashable():
    assert len({RGB(0.1, 0.2, 0.3), RGB(0.1, 0.2, 0.3), HSV(0.1, 0.2, 0.3)}) == 2


def test_immutable():
    rgb = RGB(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        rgb._value = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        rgb.r = 0.5


def test_pickle_round_trip():
    cmyk = CMYK(0.1, 0.2, 0.3, 0.4)
    assert pickle.loads(pickle.dumps(cmyk)) == cmyk


def test_repr():
    assert repr(RGB(1.0, 0.0, 0.5)) == "RGB(r=1.0, g=0.0, b=0.5)"
    assert not RGB(0, 0, 0).has_hue


def test_constants():
    assert BLACK.is_black()
    assert WHITE.is_white()


def test_components_have_no_instance_dict():
    for component in (RGB(0, 0, 0), HSV(0, 0, 0), CMYK(0, 0, 0, 0)):
        assert not hasattr(component, "__dict__")
        with pytest.raises(AttributeError):
            component.extra = 1  # type: ignore[attr-defined]
