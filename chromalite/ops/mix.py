from __future__ import annotations
from typing import Optional

import numpy as np

from ..colors.color_base import Color, ColorInput, as_color
from ..colors.mode import color_from_mode, color_to_mode
from ..errors import ColorDomainError
from ..types.color_types import ColorSpace, ColorSpaceLike
from ..utils.default import value_or_default

DEFAULT_MIX_SPACE = ColorSpace.RGBA
DEFAULT_MIX_RATIO = 0.5


def mix(
    color1: ColorInput,
    color2: ColorInput,
    space: Optional[ColorSpaceLike] = None,
    ratio: Optional[float] = None,
) -> Color:
    """
    Linearly interpolate two colors in the given space.

    Each component of ``color1.mode(space)`` moves towards the matching
    component of ``color2`` by ``ratio``. Hue is interpolated numerically, so
    in hsl/hsv a mix may take the long way around the wheel.

    Args:
        color1: Start color (ratio 0)
        color2: End color (ratio 1)
        space: Interpolation space, defaults to "rgba"
        ratio: Position between the colors in [0, 1], defaults to 0.5

    Returns:
        The mixed Color

    Raises:
        ColorDomainError: if ratio is outside [0, 1] or the space is unknown.

    >>> mix("rgb(255, 0, 0)", "rgb(0, 0, 255)").hex
    '#800080'
    """
    space = ColorSpace.from_name(value_or_default(space, DEFAULT_MIX_SPACE))
    ratio = float(value_or_default(ratio, DEFAULT_MIX_RATIO))
    if not 0.0 <= ratio <= 1.0:
        raise ColorDomainError(f"Mix ratio must be within [0, 1], got {ratio}")

    v1 = np.asarray(color_to_mode(as_color(color1), space), dtype=np.float64)
    v2 = np.asarray(color_to_mode(as_color(color2), space), dtype=np.float64)
    mixed = v1 + (v2 - v1) * ratio
    return color_from_mode(mixed.tolist(), space)
