from ..types.color_types import HSLTuple


def rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue in degrees [0, 360) shared by the HSL and HSV conversions.

    Args:
        r, g, b: channels in [0, 1]
        max_c: max(r, g, b)
        delta: max(r, g, b) - min(r, g, b), must be non-zero
    """
    if max_c == r:
        return 60.0 * (((g - b) / delta) % 6)
    if max_c == g:
        return 60.0 * (((b - r) / delta) + 2)
    return 60.0 * (((r - g) / delta) + 4)


def rgb_to_hsl(r: int, g: int, b: int) -> HSLTuple:
    """
    Convert RGB bytes to HSL.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = r / 255, g / 255, b / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # Achromatic
    if delta == 0:
        return 0.0, 0.0, lightness

    saturation = delta / (1 - abs(2 * lightness - 1))
    return rgb_hue(r, g, b, max_c, delta), saturation, lightness
