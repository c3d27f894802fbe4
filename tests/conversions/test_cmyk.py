from chromalite.conversions.cmyk import rgb_to_cmyk, cmyk_to_rgb
from ..samples import samples_rgb_cmyk

def test_rgb_to_cmyk():
    for rgb, expected in samples_rgb_cmyk.items():
        out = rgb_to_cmyk(*rgb)
        assert all(abs(o - e) < 1e-9 for o, e in zip(out, expected))

def test_cmyk_to_rgb():
    for expected, cmyk in samples_rgb_cmyk.items():
        assert cmyk_to_rgb(*cmyk) == expected

def test_black_has_no_ink_but_key():
    assert rgb_to_cmyk(0, 0, 0) == (0.0, 0.0, 0.0, 1.0)

def test_cmyk_rounds_to_two_decimals():
    c, m, y, k = rgb_to_cmyk(18, 52, 86)
    for value in (c, m, y, k):
        assert round(value, 2) == value
