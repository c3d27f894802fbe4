from __future__ import annotations
from typing import Optional

import numpy as np

from ..colors.color_base import ColorInput, as_color
from ..colors.mode import color_to_mode
from ..types.color_types import ColorSpace, ColorSpaceLike
from ..utils.default import value_or_default

DEFAULT_DISTANCE_SPACE = ColorSpace.LAB


def distance(color1: ColorInput, color2: ColorInput, space: Optional[ColorSpaceLike] = None) -> float:
    """
    Euclidean distance between two colors in ``space`` (Lab by default).

    In Lab this is the CIE76 delta E. In hsl/hsv the hue difference is taken
    as-is, without wrapping around the wheel.

    >>> round(distance("#fff", "#ff0"), 4)
    96.9476
    """
    space = ColorSpace.from_name(value_or_default(space, DEFAULT_DISTANCE_SPACE))
    v1 = np.asarray(color_to_mode(as_color(color1), space), dtype=np.float64)
    v2 = np.asarray(color_to_mode(as_color(color2), space), dtype=np.float64)
    return float(np.sqrt(np.sum((v1 - v2) ** 2)))
