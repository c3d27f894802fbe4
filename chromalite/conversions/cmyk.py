from ..types.color_types import CMYKTuple, RGBTuple
from ..utils.num_utils import clamp_byte, round_to


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYKTuple:
    """
    Convert RGB bytes to CMYK.

    Black (k = 1) yields c = m = y = 0. All four values are rounded to 2 decimals.

    Returns:
        Tuple[float, float, float, float]: (c, m, y, k) in [0, 1]
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    k = 1.0 - max(r, g, b)
    c = (1.0 - r - k) * (1.0 - k)
    m = (1.0 - g - k) * (1.0 - k)
    y = (1.0 - b - k) * (1.0 - k)
    return round_to(c, 2), round_to(m, 2), round_to(y, 2), round_to(k, 2)


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGBTuple:
    """Convert CMYK in [0, 1] to RGB bytes."""
    r = (1.0 - c) * (1.0 - k) * 255.0
    g = (1.0 - m) * (1.0 - k) * 255.0
    b = (1.0 - y) * (1.0 - k) * 255.0
    return clamp_byte(r), clamp_byte(g), clamp_byte(b)
