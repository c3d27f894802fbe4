"""
Chromalite Color Class
======================

``Color`` is an immutable RGBA value: three 8-bit channels and a float alpha.
Everything else (hsl, hsv, Lab, cmyk, hex, packed integer, name, temperature)
is a view computed on access.

Usage
-----
>>> from chromalite.colors import Color, color
>>>
>>> c = color("hsl(240, 100%, 50%)")
>>> c.rgba
(0, 0, 255, 1.0)
>>> c.hex
'#0000ff'
>>> c.name
'blue'
>>>
>>> # Vectors in any space
>>> [round(v, 2) for v in c.mode("lab")]
[32.3, 79.2, -107.86]
>>> Color.from_mode([0, 1, 0.5], "hsl").hex
'#ff0000'
>>>
>>> # Alpha returns a new color
>>> c.with_alpha(0.5).hex
'#0000ff80'
"""
from .color_base import Color, ColorInput, as_color
from .mode import color_from_mode, color_to_mode
from .color import color

__all__ = [
    'Color',
    'ColorInput',
    'as_color',
    'color',
    'color_to_mode',
    'color_from_mode',
]
