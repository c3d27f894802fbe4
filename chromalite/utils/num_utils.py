import math
import numpy as np

from ..errors import ColorDomainError

HUE_360 = 360.0


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties going away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_to(value: float, digits: int) -> float:
    """Round to a fixed number of decimals with the same tie rule as round_half_away."""
    factor = 10 ** digits
    return round_half_away(value * factor) / factor


def _require_finite(value: float, what: str) -> float:
    if not np.isfinite(value):
        raise ColorDomainError(f"{what} must be a finite number, got {value!r}")
    return value


def clamp_byte(value: float) -> int:
    """
    Round a channel and saturate it into [0, 255].

    Raises:
        ColorDomainError: if ``value`` is NaN or infinite.
    """
    _require_finite(value, "Channel")
    return int(np.clip(round_half_away(value), 0, 255))


def clamp_unit(value: float) -> float:
    """
    Saturate a value into [0.0, 1.0].

    Raises:
        ColorDomainError: if ``value`` is NaN or infinite.
    """
    _require_finite(value, "Alpha")
    return float(np.clip(value, 0.0, 1.0))


def wrap_hue(h: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    h = float(np.mod(h, HUE_360))
    # np.mod can land exactly on the modulus for tiny negative inputs
    return 0.0 if h >= HUE_360 else h
