"""Chromalite: small, immutable color values with conversions, mixing and distance."""

from .colors import Color, as_color, color, color_from_mode, color_to_mode
from .ops import brighten, brighter, darken, darker, distance, mix
from .parsers import valid
from .generator import random_color
from .conversions import (
    rgb_to_hex,
    hex_to_rgb,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_lab,
    lab_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    rgb_to_num,
    num_to_rgb,
    kelvin_to_rgb,
    rgb_to_kelvin,
    convert,
)
from .types import ColorSpace
from .data import W3CX11
from .errors import ChromaliteError, ColorParseError, ColorDomainError

__version__ = "0.1.0"

__all__ = [
    # color value
    "Color",
    "color",
    "as_color",
    "color_to_mode",
    "color_from_mode",
    # operations
    "mix",
    "distance",
    "darken",
    "darker",
    "brighten",
    "brighter",
    "valid",
    "random_color",
    # conversions
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_num",
    "num_to_rgb",
    "kelvin_to_rgb",
    "rgb_to_kelvin",
    "convert",
    "ColorSpace",
    "W3CX11",
    # errors
    "ChromaliteError",
    "ColorParseError",
    "ColorDomainError",
    "__version__",
]
