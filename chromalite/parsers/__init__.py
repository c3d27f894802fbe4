from .notation import (
    parse_color_string,
    parse_cmyk,
    parse_hex,
    parse_hsl,
    parse_hsv,
    parse_lab,
    parse_name,
    parse_rgb,
    parse_rgba,
)
from .valid import valid

__all__ = [
    "parse_color_string",
    "parse_cmyk",
    "parse_hex",
    "parse_hsl",
    "parse_hsv",
    "parse_lab",
    "parse_name",
    "parse_rgb",
    "parse_rgba",
    "valid",
]
