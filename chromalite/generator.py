from __future__ import annotations
from typing import Optional

import numpy as np

from .colors.color_base import Color

HEX_ALPHABET = "0123456789abcdef"


def random_color(rng: Optional[np.random.Generator] = None) -> Color:
    """
    Generate an opaque random color.

    Six hex digits are drawn uniformly and parsed as ``#rrggbb``.

    Args:
        rng: numpy random Generator, a fresh ``np.random.default_rng()`` if omitted.
            Pass a seeded generator for reproducible output.
    """
    if rng is None:
        rng = np.random.default_rng()
    digits = rng.integers(0, 16, size=6)
    code = "#" + "".join(HEX_ALPHABET[int(d)] for d in digits)
    return Color.from_string(code)
