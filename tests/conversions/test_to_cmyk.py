from chromakit.conversions.to_cmyk import unit_rgb_to_cmyk
from chromakit.conversions import rgb_to_cmyk, hsv_to_cmyk, cmyk_to_hsv
from chromakit.colors import RGB, HSV, CMYK
from tests.samples import samples_rgb_cmyk

tolerance = 1e-9


def test_unit_rgb_to_cmyk():
    for (r, g, b), expected in samples_rgb_cmyk.items():
        out = unit_rgb_to_cmyk(r, g, b)

        assert len(out) == 4
        for value, exp in zip(out, expected):
            assert abs(value - exp) < tolerance


def test_key_is_min_of_complements():
    c, m, y, k = unit_rgb_to_cmyk(0.2, 0.6, 0.4)
    assert abs(k - 0.4) < tolerance
    # the channel with the largest RGB value carries no ink
    assert m == 0.0
    assert abs(c - 0.4) < tolerance
    assert abs(y - 0.2) < tolerance


def test_rgb_to_cmyk_component():
    cmyk = rgb_to_cmyk(RGB(1.0, 1.0, 1.0))
    assert isinstance(cmyk, CMYK)
    assert cmyk == CMYK(0.0, 0.0, 0.0, 0.0)


def test_hsv_cmyk_goes_through_rgb():
    hsv = HSV(1 / 3, 1.0, 1.0)
    assert hsv_to_cmyk(hsv) == rgb_to_cmyk(hsv.to_rgb())

    cmyk = CMYK(0.0, 1.0, 1.0, 0.0)
    assert cmyk_to_hsv(cmyk) == cmyk.to_rgb().to_hsv()
    assert cmyk_to_hsv(cmyk) == HSV(0.0, 1.0, 1.0)
