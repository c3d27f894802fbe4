from typing import Callable, Tuple

from ..conversions.hex import hex_to_rgb
from ..data.w3cx11 import hex_for_name
from ..errors import ColorParseError
from ..types.color_types import (
    CMYKTuple,
    ColorSpace,
    HSLTuple,
    HSVTuple,
    LabTuple,
    RGBATuple,
    RGBTuple,
    Scalar,
)
from ..utils.num_utils import round_half_away
from .tokens import compact, parse_components


def parse_hex(text: str) -> RGBATuple:
    try:
        return hex_to_rgb(compact(text))
    except ColorParseError as exc:
        raise ColorParseError(text, exc.reason) from exc


def parse_rgb(text: str) -> RGBTuple:
    """Parse ``rgb(r, g, b)``; channels are rounded to the nearest byte."""
    r, g, b = parse_components(text, "rgb", 3)
    return round_half_away(r), round_half_away(g), round_half_away(b)


def parse_rgba(text: str) -> RGBATuple:
    """Parse ``rgba(r, g, b, a)``; channels are rounded, alpha stays a float."""
    r, g, b, alpha = parse_components(text, "rgba", 4)
    return round_half_away(r), round_half_away(g), round_half_away(b), alpha


def parse_hsl(text: str) -> HSLTuple:
    h, s, l = parse_components(text, "hsl", 3)
    return h, s, l


def parse_hsv(text: str) -> HSVTuple:
    h, s, v = parse_components(text, "hsv", 3)
    return h, s, v


def parse_lab(text: str) -> LabTuple:
    l, a, b = parse_components(text, "lab", 3)
    return l, a, b


def parse_cmyk(text: str) -> CMYKTuple:
    c, m, y, k = parse_components(text, "cmyk", 4)
    return c, m, y, k


def parse_name(text: str) -> RGBATuple:
    code = hex_for_name(text)
    if code is None:
        raise ColorParseError(text, "unknown color name")
    return hex_to_rgb(code)


# Order matters: "rgba(" must be tried before "rgb(".
PREFIX_PARSERS: Tuple[Tuple[str, ColorSpace, Callable[[str], Tuple[Scalar, ...]]], ...] = (
    ("#", ColorSpace.RGBA, parse_hex),
    ("rgba(", ColorSpace.RGBA, parse_rgba),
    ("rgb(", ColorSpace.RGB, parse_rgb),
    ("hsl(", ColorSpace.HSL, parse_hsl),
    ("hsv(", ColorSpace.HSV, parse_hsv),
    ("lab(", ColorSpace.LAB, parse_lab),
    ("cmyk(", ColorSpace.CMYK, parse_cmyk),
)


def parse_color_string(text: str) -> Tuple[ColorSpace, Tuple[Scalar, ...]]:
    """
    Parse any supported color notation into a space-tagged vector.

    Args:
        text: ``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``rgb(...)``, ``rgba(...)``,
            ``hsl(...)``, ``hsv(...)``, ``lab(...)``, ``cmyk(...)`` or a color name.
            Case and whitespace are ignored.

    Returns:
        (space, components) where components match ``space.arity``.

    Raises:
        ColorParseError: if the text is not a valid color.
    """
    if not isinstance(text, str):
        raise ColorParseError(repr(text), "expected a string")

    normalized = compact(text)
    for prefix, space, parser in PREFIX_PARSERS:
        if normalized.startswith(prefix):
            return space, parser(text)
    return ColorSpace.RGBA, parse_name(text)
