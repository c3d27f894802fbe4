from __future__ import annotations
from numbers import Integral
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, Union

from ..conversions import (
    convert,
    kelvin_to_rgb,
    num_to_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_kelvin,
    rgb_to_lab,
    rgb_to_num,
)
from ..data.w3cx11 import name_for_hex
from ..errors import ColorDomainError
from ..parsers import parse_color_string
from ..types.color_types import (
    CMYKTuple,
    ColorSpace,
    ColorSpaceLike,
    HSLTuple,
    HSVTuple,
    LabTuple,
    RGBATuple,
    RGBTuple,
    Scalar,
)
from ..utils.num_utils import clamp_byte, clamp_unit


class Color:
    """
    An immutable RGBA color.

    The canonical value is three 8-bit channels plus a float alpha. Channels are
    rounded and clamped to [0, 255] and alpha is clamped to [0.0, 1.0] on
    construction. Every other representation (hsl, hsv, lab, cmyk, hex, num,
    name, temperature) is computed from it on access.

    >>> Color(171, 205, 239).hex
    '#abcdef'
    >>> Color.from_string("hsl(240, 100%, 50%)").rgba
    (0, 0, 255, 1.0)
    """

    __slots__ = ('_rgba', '_is_frozen')

    # Attached in colors/color.py
    mode: Callable[[Color, ColorSpaceLike], List[float]]
    from_mode: Callable[[Sequence[Scalar], ColorSpaceLike], Color]
    mix: Callable[..., Color]
    distance: Callable[..., float]
    darken: Callable[..., Color]
    darker: Callable[..., Color]
    brighten: Callable[..., Color]
    brighter: Callable[..., Color]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> None:
        self._rgba: RGBATuple = (
            clamp_byte(red),
            clamp_byte(green),
            clamp_byte(blue),
            clamp_unit(alpha),
        )
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_string(cls, text: str) -> Color:
        """
        Build a color from any supported notation or color name.

        Raises:
            ColorParseError: if ``text`` cannot be parsed.
        """
        space, values = parse_color_string(text)
        return cls(*convert(values, space, ColorSpace.RGBA))

    parse = from_string

    @classmethod
    def from_num(cls, num: int) -> Color:
        """Build an opaque color from a 24-bit integer ``0xRRGGBB``."""
        return cls(*num_to_rgb(num))

    @classmethod
    def from_temperature(cls, kelvin: float) -> Color:
        """Build the color of a black body at ``kelvin``."""
        return cls(*kelvin_to_rgb(kelvin))

    # ------------------ CANONICAL VALUE ------------------
    @property
    def red(self) -> int:
        return self._rgba[0]

    @property
    def green(self) -> int:
        return self._rgba[1]

    @property
    def blue(self) -> int:
        return self._rgba[2]

    @property
    def alpha(self) -> float:
        return self._rgba[3]

    @property
    def rgb(self) -> RGBTuple:
        r, g, b, _ = self._rgba
        return r, g, b

    @property
    def rgba(self) -> RGBATuple:
        return self._rgba

    def with_alpha(self, alpha: Scalar) -> Color:
        """
        Return a copy of this color with a new alpha.

        Alpha outside [0, 1] is clamped, not rejected.
        """
        return self.__class__(*self.rgb, alpha)

    set_alpha = with_alpha

    # ------------------ VIEWS ------------------
    @property
    def hex(self) -> str:
        """``#rrggbb``, or ``#rrggbbaa`` when alpha is below 1."""
        return rgb_to_hex(self._rgba)

    @property
    def num(self) -> int:
        return rgb_to_num(*self.rgb)

    @property
    def hsl(self) -> HSLTuple:
        return rgb_to_hsl(*self.rgb)

    @property
    def hsla(self) -> Tuple[float, float, float, float]:
        return (*self.hsl, self.alpha)

    @property
    def hsv(self) -> HSVTuple:
        return rgb_to_hsv(*self.rgb)

    @property
    def lab(self) -> LabTuple:
        return rgb_to_lab(*self.rgb)

    @property
    def cmyk(self) -> CMYKTuple:
        return rgb_to_cmyk(*self.rgb)

    @property
    def temperature(self) -> int:
        """Estimated color temperature in Kelvin."""
        return rgb_to_kelvin(*self.rgb)

    @property
    def name(self) -> str:
        """
        The W3C/X11 name of this color, falling back to its hex code.

        >>> Color(0, 250, 154).name
        'mediumspringgreen'
        """
        code = self.hex
        return name_for_hex(code) or code

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._rgba)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgba == other._rgba

    def __hash__(self) -> int:
        return hash(self._rgba)

    def __repr__(self) -> str:
        r, g, b, a = self._rgba
        return f"{self.__class__.__name__}({r}, {g}, {b}, {a})"

    def __str__(self) -> str:
        return self.hex


ColorInput = Union[Color, str, int, Sequence[Scalar]]


def as_color(value: ColorInput, alpha: Optional[Scalar] = None) -> Color:
    """
    Coerce a Color, notation string, 24-bit integer or (r, g, b[, a]) sequence into a Color.

    Args:
        value: The color to coerce
        alpha: Optional alpha override

    Raises:
        ColorParseError: for an unparsable string
        ColorDomainError: for an out-of-range integer or a sequence of the wrong length
        TypeError: for any other input type
    """
    if isinstance(value, Color):
        color = value
    elif isinstance(value, str):
        color = Color.from_string(value)
    elif isinstance(value, bool):
        raise TypeError(f"Unsupported color input: {value!r}")
    elif isinstance(value, Integral):
        color = Color.from_num(int(value))
    elif isinstance(value, Sequence) or hasattr(value, "__len__"):
        values: Tuple[Any, ...] = tuple(value)  # type: ignore[arg-type]
        if len(values) not in (3, 4):
            raise ColorDomainError(f"Expected (r, g, b) or (r, g, b, a), got {len(values)} values")
        color = Color(*values)
    else:
        raise TypeError(f"Unsupported color input: {value!r}")

    if alpha is not None:
        color = color.with_alpha(alpha)
    return color
