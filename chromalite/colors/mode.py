from __future__ import annotations
from typing import Callable, List, Sequence

from ..conversions import convert
from ..errors import ColorDomainError
from ..types.color_types import ColorSpace, ColorSpaceLike, Scalar
from .color_base import Color

_MODE_GETTERS: dict[ColorSpace, Callable[[Color], Sequence[Scalar]]] = {
    ColorSpace.RGB: lambda c: c.rgb,
    ColorSpace.RGBA: lambda c: c.rgba,
    ColorSpace.HSL: lambda c: c.hsl,
    ColorSpace.HSV: lambda c: c.hsv,
    ColorSpace.LAB: lambda c: c.lab,
    ColorSpace.CMYK: lambda c: c.cmyk,
}


def color_to_mode(color: Color, space: ColorSpaceLike) -> List[float]:
    """
    Express ``color`` as a flat vector in ``space``.

    Alpha is only carried by the rgba vector.

    Raises:
        ColorDomainError: on an unknown space name.
    """
    getter = _MODE_GETTERS[ColorSpace.from_name(space)]
    return [float(v) for v in getter(color)]


def color_from_mode(vector: Sequence[Scalar], space: ColorSpaceLike) -> Color:
    """
    Build a Color from a vector in ``space``.

    Out-of-gamut results (from Lab in particular) are clamped into the RGB cube.

    Raises:
        ColorDomainError: on an unknown space or a vector of the wrong length.
    """
    target = ColorSpace.from_name(space)
    values = tuple(vector)
    if len(values) != target.arity:
        raise ColorDomainError(
            f"{target.value} expects {target.arity} components, got {len(values)}"
        )
    return Color(*convert(values, target, ColorSpace.RGBA))
