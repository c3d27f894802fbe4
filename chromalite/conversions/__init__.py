"""
Chromalite Color Space Conversions
==================================

Pure numeric kernels between RGB and the other supported representations.
Every kernel takes and returns plain tuples; RGB channels are bytes in
[0, 255], hues are degrees, and ratios (saturation, lightness, value, CMYK,
alpha) are in [0, 1].

Conversion Functions
-------------------

RGB <-> Hex:
    rgb_to_hex(rgba), hex_to_rgb(code)

RGB <-> HSL:
    rgb_to_hsl(r, g, b), hsl_to_rgb(h, s, l)

RGB <-> HSV:
    rgb_to_hsv(r, g, b), hsv_to_rgb(h, s, v)

RGB <-> CIE-Lab:
    rgb_to_lab(r, g, b), lab_to_rgb(l, a, b)

RGB <-> CMYK:
    rgb_to_cmyk(r, g, b), cmyk_to_rgb(c, m, y, k)

RGB <-> packed integer:
    rgb_to_num(r, g, b), num_to_rgb(num)

Color temperature:
    kelvin_to_rgb(kelvin), kelvin_to_rgb_tanner_helland(kelvin)
    rgb_to_kelvin(r, g, b)

High-Level API
-------------
    convert(color, from_space, to_space)
        Route any supported space to any other through RGBA

Examples
--------
>>> from chromalite.conversions import rgb_to_hsl, hsl_to_rgb, convert
>>> rgb_to_hsl(255, 0, 0)
(0.0, 1.0, 0.5)
>>> hsl_to_rgb(240, 1.0, 0.5)
(0, 0, 255)
>>> convert((0.2, 0.8, 0.0, 0.0), "cmyk", "rgb")
(204, 51, 255)
"""

from .hex import rgb_to_hex, hex_to_rgb
from .to_hsl import rgb_to_hsl
from .to_hsv import rgb_to_hsv
from .to_rgb import hsl_to_rgb, hsv_to_rgb
from .lab import rgb_to_lab, lab_to_rgb
from .cmyk import rgb_to_cmyk, cmyk_to_rgb
from .numbers import rgb_to_num, num_to_rgb
from .temperature import kelvin_to_rgb, kelvin_to_rgb_tanner_helland, rgb_to_kelvin
from .wrapper import convert

from ..types.color_types import ColorSpace

__all__ = [
    # Hex
    'rgb_to_hex',
    'hex_to_rgb',

    # HSL
    'rgb_to_hsl',
    'hsl_to_rgb',

    # HSV
    'rgb_to_hsv',
    'hsv_to_rgb',

    # Lab
    'rgb_to_lab',
    'lab_to_rgb',

    # CMYK
    'rgb_to_cmyk',
    'cmyk_to_rgb',

    # Packed integer
    'rgb_to_num',
    'num_to_rgb',

    # Temperature
    'kelvin_to_rgb',
    'kelvin_to_rgb_tanner_helland',
    'rgb_to_kelvin',

    # High-level API
    'convert',

    # Types
    'ColorSpace',
]
