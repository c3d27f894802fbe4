from .default import value_or_default
from .num_utils import clamp_byte, clamp_unit, round_half_away, round_to, wrap_hue

__all__ = [
    "value_or_default",
    "clamp_byte",
    "clamp_unit",
    "round_half_away",
    "round_to",
    "wrap_hue",
]
