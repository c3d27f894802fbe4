"""
Color temperature (Kelvin) conversions.

``kelvin_to_rgb`` uses Neil Bartlett's curve fit (``a + b*x + c*ln(x)`` per
channel) of Tanner Helland's black-body data; ``rgb_to_kelvin`` inverts it by
bisection on the blue/red ratio.

See https://github.com/neilbartlett/color-temperature
"""

import math
import warnings

from ..types.color_types import RGBTuple
from ..utils.num_utils import clamp_byte, round_half_away

MIN_KELVIN = 1000.0
MAX_KELVIN = 40000.0
KELVIN_EPSILON = 0.4


def _fit(a: float, b: float, c: float, x: float) -> float:
    # ln(x) diverges for x <= 0, where every fit saturates to 0.
    if x <= 0:
        return 0.0
    return a + b * x + c * math.log(x)


def kelvin_to_rgb(kelvin: float) -> RGBTuple:
    """
    Approximate the RGB color of a black body at ``kelvin``.

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    temp = kelvin / 100.0

    if temp < 66.0:
        r = 255.0
        g = _fit(-155.25485562709179, -0.44596950469579133, 104.49216199393888, temp - 2.0)
    else:
        r = _fit(351.97690566805693, 0.114206453784165, -40.25366309332127, temp - 55.0)
        g = _fit(325.4494125711974, 0.07943456536662342, -28.0852963507957, temp - 50.0)

    if temp >= 66.0:
        b = 255.0
    elif temp <= 20.0:
        b = 0.0
    else:
        b = _fit(-254.76935184120902, 0.8274096064007395, 115.67994401066147, temp - 10.0)

    return clamp_byte(r), clamp_byte(g), clamp_byte(b)


def kelvin_to_rgb_tanner_helland(kelvin: float) -> RGBTuple:
    """Tanner Helland's original (less accurate) black-body approximation."""
    temp = kelvin / 100.0

    if temp < 66.0:
        r = 255.0
        g = 99.4708025861 * math.log(temp) - 161.1195681661 if temp > 0 else 0.0
    else:
        r = 329.698727446 * (temp - 60.0) ** -0.1332047592
        g = 288.1221695283 * (temp - 60.0) ** -0.0755148492

    if temp >= 66.0:
        b = 255.0
    elif temp <= 19.0:
        b = 0.0
    else:
        b = 138.5177312231 * math.log(temp - 10.0) - 305.0447927307

    return clamp_byte(r), clamp_byte(g), clamp_byte(b)


def rgb_to_kelvin(r: int, g: int, b: int) -> int:
    """
    Estimate the color temperature of an RGB color.

    Bisects [MIN_KELVIN, MAX_KELVIN] until the interval is narrower than
    KELVIN_EPSILON, matching the blue/red ratio of ``kelvin_to_rgb``.

    Returns:
        The last midpoint, rounded to the nearest Kelvin.
    """
    if r == 0:
        warnings.warn(
            "Temperature estimate of a color without a red component is unreliable; "
            f"result saturates at {MAX_KELVIN:.0f}K.",
            RuntimeWarning,
            stacklevel=2,
        )
        target = math.inf
    else:
        target = b / r

    lo, hi = MIN_KELVIN, MAX_KELVIN
    temp = lo
    while hi - lo > KELVIN_EPSILON:
        temp = (hi + lo) * 0.5
        cr, _, cb = kelvin_to_rgb(temp)
        if cb / cr >= target:
            hi = temp
        else:
            lo = temp
    return round_half_away(temp)
