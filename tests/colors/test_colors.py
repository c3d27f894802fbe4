import math

import numpy as np
import pytest

from chromalite import Color, color
from chromalite.errors import ColorDomainError, ColorParseError
from ..samples import samples_notation_rgba, samples_rgb_hsl, samples_rgb_hsv, samples_rgb_lab

def test_construction_clamps():
    assert Color(300, -5, 12.5).rgba == (255, 0, 13, 1.0)
    assert Color(0, 0, 0, 1.5).alpha == 1.0
    assert Color(0, 0, 0, -0.5).alpha == 0.0

def test_channels_are_ints():
    c = Color(10.4, 20.6, 30)
    assert c.rgb == (10, 21, 30)
    assert all(isinstance(v, int) for v in c.rgb)
    assert isinstance(c.alpha, float)

def test_accessors():
    c = Color(1, 2, 3, 0.5)
    assert (c.red, c.green, c.blue, c.alpha) == (1, 2, 3, 0.5)
    assert tuple(c) == (1, 2, 3, 0.5)

def test_from_string():
    for text, expected in samples_notation_rgba.items():
        assert Color.from_string(text).rgba == expected, text
        assert Color.parse(text).rgba == expected, text

def test_from_string_invalid():
    with pytest.raises(ColorParseError):
        Color.from_string("rgb(1, 2)")

def test_hex():
    assert Color.from_string("#abcdef").hex == "#abcdef"
    assert Color(255, 0, 0, 0.5).hex == "#ff000080"
    assert str(Color(255, 0, 0)) == "#ff0000"

def test_num():
    assert Color(0x12, 0x34, 0x56).num == 0x123456
    assert Color.from_num(0xABCDEF).rgba == (171, 205, 239, 1.0)
    with pytest.raises(ColorDomainError):
        Color.from_num(0x1000000)

def test_hsl_view():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = Color(*rgb).hsl
        assert abs(h - h_exp) < .5
        assert abs(s - s_exp) < 1/255
        assert abs(l - l_exp) < 1/255

def test_hsla_view():
    assert Color(255, 0, 0, 0.25).hsla == (0.0, 1.0, 0.5, 0.25)

def test_hsv_view():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = Color(*rgb).hsv
        assert abs(h - h_exp) < .5
        assert abs(s - s_exp) < 1/255
        assert abs(v - v_exp) < 1/255

def test_lab_view():
    for rgb, expected in samples_rgb_lab.items():
        assert Color(*rgb).lab == pytest.approx(expected, abs=0.05)

def test_cmyk_view():
    assert Color.from_string("cmyk(20%, 80%, 0, 0)").hex == "#cc33ff"
    assert Color(204, 51, 255).cmyk == (0.2, 0.8, 0.0, 0.0)

def test_temperature():
    assert Color.from_temperature(2000).hex == "#ff8b00"
    assert Color(255, 139, 20).temperature == 2000
    assert Color(255, 255, 255).temperature == 6507

def test_equality_and_hash():
    assert Color(1, 2, 3) == Color(1.2, 2, 3)
    assert Color(1, 2, 3) != Color(1, 2, 3, 0.5)
    assert len({Color(1, 2, 3), Color(1, 2, 3, 1.0), Color(3, 2, 1)}) == 2
    assert Color(1, 2, 3) != (1, 2, 3, 1.0)

def test_repr():
    assert repr(Color(255, 0, 0)) == "Color(255, 0, 0, 1.0)"

def test_immutable():
    c = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        c._rgba = (4, 5, 6, 1.0)
    with pytest.raises(AttributeError):
        c.red = 4
    with pytest.raises(AttributeError):
        c.extra = True
    assert c.rgba == (1, 2, 3, 1.0)

def test_color_factory():
    red = Color(255, 0, 0)
    assert color(red) is red
    assert color("red") == red
    assert color(0xFF0000) == red
    assert color((255, 0, 0)) == red
    assert color([255, 0, 0, 0.5]) == red.with_alpha(0.5)
    assert color("red", alpha=0.5).alpha == 0.5

def test_color_factory_rejects():
    with pytest.raises(ColorDomainError):
        color((1, 2))
    with pytest.raises(TypeError):
        color(True)
    with pytest.raises(TypeError):
        color(object())

def test_color_factory_accepts_numpy_integers():
    assert color(np.int64(0xFF0000)) == Color(255, 0, 0)
    assert color(np.uint32(0x00FA9A)).name == "mediumspringgreen"

@pytest.mark.parametrize("alpha", [math.nan, math.inf, -math.inf])
def test_non_finite_alpha_is_rejected(alpha):
    with pytest.raises(ColorDomainError):
        Color(1, 2, 3, alpha)
    with pytest.raises(ColorDomainError):
        Color(1, 2, 3).with_alpha(alpha)

@pytest.mark.parametrize("channel", [math.nan, math.inf, -math.inf])
def test_non_finite_channel_is_rejected(channel):
    with pytest.raises(ColorDomainError):
        Color(channel, 0, 0)
    with pytest.raises(ColorDomainError):
        Color.from_mode([0, 0, channel], "rgb")

def test_alpha_always_in_unit_range():
    for alpha in (-1e9, -0.0, 0.0, 0.3, 1.0, 1e9):
        c = Color(1, 2, 3, alpha)
        assert 0.0 <= c.alpha <= 1.0
        assert c == Color(*c.rgba)
