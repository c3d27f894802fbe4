from chromalite.conversions.to_rgb import hsl_to_rgb, hsv_to_rgb
from ..samples import samples_hsl_rgb, samples_hsv_rgb

def test_hsl_to_rgb():
    for (h, s, l), expected in samples_hsl_rgb.items():
        assert hsl_to_rgb(h, s, l) == expected

def test_hsv_to_rgb():
    for (h, s, v), expected in samples_hsv_rgb.items():
        assert hsv_to_rgb(h, s, v) == expected

def test_hsl_to_rgb_returns_ints():
    r, g, b = hsl_to_rgb(210, 0.68, 205 / 255)
    assert all(isinstance(c, int) for c in (r, g, b))
    assert (r, g, b) == (171, 205, 239)

def test_hue_wraps():
    assert hsl_to_rgb(360, 1, 0.5) == hsl_to_rgb(0, 1, 0.5)
    assert hsv_to_rgb(480, 1, 1) == hsv_to_rgb(120, 1, 1)
    assert hsv_to_rgb(-60, 1, 1) == hsv_to_rgb(300, 1, 1)
