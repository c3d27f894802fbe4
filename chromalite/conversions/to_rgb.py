from ..types.color_types import RGBTuple
from ..utils.num_utils import clamp_byte, wrap_hue


def _sector_rgb(h: float, c: float, x: float) -> tuple[float, float, float]:
    """Pick the (r, g, b) offsets for the 60 degree sector containing ``h``."""
    hue_section = int(h // 60)

    if hue_section == 0:
        return c, x, 0.0
    if hue_section == 1:
        return x, c, 0.0
    if hue_section == 2:
        return 0.0, c, x
    if hue_section == 3:
        return 0.0, x, c
    if hue_section == 4:
        return x, 0.0, c
    return c, 0.0, x


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTuple:
    """
    Convert HSL to RGB bytes.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    h = wrap_hue(h)
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    r, g, b = _sector_rgb(h, c, x)
    return clamp_byte((r + m) * 255), clamp_byte((g + m) * 255), clamp_byte((b + m) * 255)


def hsv_to_rgb(h: float, s: float, v: float) -> RGBTuple:
    """
    Convert HSV to RGB bytes.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    h = wrap_hue(h)
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    r, g, b = _sector_rgb(h, c, x)
    return clamp_byte((r + m) * 255), clamp_byte((g + m) * 255), clamp_byte((b + m) * 255)
