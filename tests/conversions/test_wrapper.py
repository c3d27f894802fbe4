import pytest

from chromalite.conversions import convert, ColorSpace
from chromalite.errors import ColorDomainError
from ..samples import samples_rgb_hsv, samples_rgb_hsl

def test_convert_returns_tuple():
    result = convert((255, 128, 64), "rgb", "hsv")
    assert isinstance(result, tuple)
    assert len(result) == 3

def test_same_space_is_identity():
    assert convert((1, 2, 3), "rgb", "rgb") == (1, 2, 3)
    assert convert((1, 2, 3, 0.5), ColorSpace.RGBA, "RGBA") == (1, 2, 3, 0.5)

def test_rgb_to_hsv():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = convert(rgb, "rgb", "hsv")
        assert abs(h - h_exp) < .5
        assert abs(s - s_exp) < 1/255
        assert abs(v - v_exp) < 1/255

def test_hsl_to_rgba_adds_alpha():
    for rgb, hsl in samples_rgb_hsl.items():
        assert convert(hsl, "hsl", "rgba") == (*rgb, 1.0)

def test_rgba_drops_alpha():
    assert convert((10, 20, 30, 0.3), "rgba", "rgb") == (10, 20, 30)

def test_lab_is_clamped_into_gamut():
    r, g, b = convert((50, 100, -120), "lab", "rgb")
    assert all(0 <= c <= 255 for c in (r, g, b))

def test_cmyk_to_hsl():
    h, s, l = convert((0, 1, 1, 0), "cmyk", "hsl")
    assert (h, s, l) == (0.0, 1.0, 0.5)

@pytest.mark.parametrize("color,space", [((1, 2), "rgb"), ((1, 2, 3), "rgba"), ((0, 0, 0), "cmyk")])
def test_wrong_arity(color, space):
    with pytest.raises(ColorDomainError):
        convert(color, space, "hsl")

def test_unknown_space():
    with pytest.raises(ColorDomainError):
        convert((1, 2, 3), "xyz", "rgb")
    with pytest.raises(ColorDomainError):
        convert((1, 2, 3), "rgb", "hsluv")
