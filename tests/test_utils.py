import pytest

from chromalite.types import ColorSpace
from chromalite.errors import ColorDomainError
from chromalite.utils import clamp_byte, clamp_unit, round_half_away, round_to, value_or_default, wrap_hue

def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.49) == 0
    assert round_half_away(127.5) == 128

def test_round_to():
    assert round_to(0.125, 2) == 0.13
    assert round_to(0.5019607843137255, 2) == 0.5

def test_clamps():
    assert clamp_byte(-3) == 0
    assert clamp_byte(255.6) == 255
    assert clamp_byte(12.5) == 13
    assert clamp_unit(1.2) == 1.0
    assert clamp_unit(-0.1) == 0.0

def test_wrap_hue():
    assert wrap_hue(360) == 0.0
    assert wrap_hue(-30) == 330.0
    assert wrap_hue(725) == 5.0
    assert 0 <= wrap_hue(-1e-20) < 360

def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0

def test_color_space_from_name():
    assert ColorSpace.from_name("HSL") is ColorSpace.HSL
    assert ColorSpace.from_name(ColorSpace.LAB) is ColorSpace.LAB
    assert ColorSpace.CMYK.arity == 4
    with pytest.raises(ColorDomainError):
        ColorSpace.from_name("hsla")

@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_clamps_reject_non_finite(value):
    with pytest.raises(ColorDomainError):
        clamp_byte(value)
    with pytest.raises(ColorDomainError):
        clamp_unit(value)
