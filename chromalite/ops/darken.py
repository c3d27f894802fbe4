"""
Lightness adjustments in CIE-Lab.

One unit of ``amount`` moves L* by ``KN`` (18). Positive amounts darken,
negative amounts brighten. Alpha is kept.
"""
from __future__ import annotations
from typing import Optional

from ..colors.color_base import Color, ColorInput, as_color
from ..conversions.lab import lab_to_rgb
from ..utils.default import value_or_default

KN = 18.0
DEFAULT_AMOUNT = 1.0


def darken(color: ColorInput, amount: Optional[float] = None) -> Color:
    """
    >>> darken("hotpink").hex
    '#c93384'
    """
    color = as_color(color)
    amount = float(value_or_default(amount, DEFAULT_AMOUNT))
    l, a, b = color.lab
    r, g, bl = lab_to_rgb(l - KN * amount, a, b)
    return Color(r, g, bl, color.alpha)


def brighten(color: ColorInput, amount: Optional[float] = None) -> Color:
    """
    >>> brighten("#7760BF").hex
    '#a98ef2'
    """
    amount = float(value_or_default(amount, DEFAULT_AMOUNT))
    return darken(color, -amount)


darker = darken
brighter = brighten
