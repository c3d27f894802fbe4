"""
RGB <-> CIE-L*a*b* conversions under the D65 reference white.

https://en.wikipedia.org/wiki/Lab_color_space#CIELAB-CIEXYZ_conversions
"""

from ..types.color_types import LabTuple
from ..utils.num_utils import round_half_away

# D65 standard referent
XN = 0.950470
YN = 1.0
ZN = 1.088830

LAB_T0 = 4.0 / 29.0
LAB_T1 = 6.0 / 29.0
LAB_T2 = 3.0 * LAB_T1 * LAB_T1
LAB_T3 = LAB_T1 * LAB_T1 * LAB_T1


def _rgb_xyz(c: float) -> float:
    c = c / 255.0
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _xyz_lab(t: float) -> float:
    if t > LAB_T3:
        return t ** (1.0 / 3.0)
    return t / LAB_T2 + LAB_T0


def _lab_xyz(t: float) -> float:
    if t > LAB_T1:
        return t * t * t
    return LAB_T2 * (t - LAB_T0)


def _xyz_rgb(r: float) -> float:
    if r <= 0.00304:
        return 255.0 * (12.92 * r)
    return 255.0 * (1.055 * r ** (1.0 / 2.4) - 0.055)


def rgb_to_xyz(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert RGB bytes to companded XYZ ratios ``f(X/Xn), f(Y/Yn), f(Z/Zn)``."""
    r, g, b = _rgb_xyz(r), _rgb_xyz(g), _rgb_xyz(b)
    x = _xyz_lab((0.4124564 * r + 0.3575761 * g + 0.1804375 * b) / XN)
    y = _xyz_lab((0.2126729 * r + 0.7151522 * g + 0.0721750 * b) / YN)
    z = _xyz_lab((0.0193339 * r + 0.1191920 * g + 0.9503041 * b) / ZN)
    return x, y, z


def rgb_to_lab(r: int, g: int, b: int) -> LabTuple:
    """
    Convert RGB bytes to CIE-Lab.

    Returns:
        Tuple[float, float, float]: (L [0,100], a, b); L is floored at 0
    """
    x, y, z = rgb_to_xyz(r, g, b)
    lightness = max(116.0 * y - 16.0, 0.0)
    return lightness, 500.0 * (x - y), 200.0 * (y - z)


def lab_to_rgb(l: float, a: float, b: float) -> tuple[int, int, int]:
    """
    Convert CIE-Lab to RGB bytes.

    Channels are rounded but not clamped: colors outside the sRGB gamut can
    come back below 0 or above 255.
    """
    y = (l + 16.0) / 116.0
    x = y + a / 500.0
    z = y - b / 200.0

    y = YN * _lab_xyz(y)
    x = XN * _lab_xyz(x)
    z = ZN * _lab_xyz(z)

    r = _xyz_rgb(3.2404542 * x - 1.5371385 * y - 0.4985314 * z)
    g = _xyz_rgb(-0.9692660 * x + 1.8760108 * y + 0.0415560 * z)
    b_ = _xyz_rgb(0.0556434 * x - 0.2040259 * y + 1.0572252 * z)
    return round_half_away(r), round_half_away(g), round_half_away(b_)
