from ..types.color_types import HSVTuple
from .to_hsl import rgb_hue


def rgb_to_hsv(r: int, g: int, b: int) -> HSVTuple:
    """
    Convert RGB bytes to HSV.

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    r, g, b = r / 255, g / 255, b / 255
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)

    if delta == 0:
        return 0.0, 0.0, max_c

    return rgb_hue(r, g, b, max_c, delta), delta / max_c, max_c
