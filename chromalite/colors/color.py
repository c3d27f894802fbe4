from __future__ import annotations
from typing import List, Optional, Sequence

from .color_base import Color, ColorInput, as_color
from .mode import color_from_mode, color_to_mode
from ..ops.darken import brighten, darken
from ..ops.distance import distance
from ..ops.mix import mix
from ..types.color_types import ColorSpaceLike, Scalar


def color_mode(self: Color, space: ColorSpaceLike) -> List[float]:
    """
    Return this color as a vector in ``space``.

    >>> Color(255, 0, 0).mode("hsl")
    [0.0, 1.0, 0.5]
    """
    return color_to_mode(self, space)


def color_mix(
    self: Color,
    other: ColorInput,
    space: Optional[ColorSpaceLike] = None,
    ratio: Optional[float] = None,
) -> Color:
    """Mix this color towards ``other``. See :func:`chromalite.ops.mix`."""
    return mix(self, other, space, ratio)


def color_distance(self: Color, other: ColorInput, space: Optional[ColorSpaceLike] = None) -> float:
    return distance(self, other, space)


def color_darken(self: Color, amount: Optional[float] = None) -> Color:
    return darken(self, amount)


def color_brighten(self: Color, amount: Optional[float] = None) -> Color:
    return brighten(self, amount)


def _from_mode(cls: type[Color], vector: Sequence[Scalar], space: ColorSpaceLike) -> Color:
    return color_from_mode(vector, space)


Color.mode = color_mode
Color.from_mode = classmethod(_from_mode)  # type: ignore[assignment]
Color.mix = color_mix
Color.distance = color_distance
Color.darken = color_darken
Color.darker = color_darken
Color.brighten = color_brighten
Color.brighter = color_brighten

color = as_color
