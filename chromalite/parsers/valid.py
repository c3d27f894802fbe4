from ..data.w3cx11 import W3CX11
from .tokens import compact

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

FUNCTIONAL_PREFIXES = ("rgba", "rgb", "hsl", "hsv", "lab", "cmyk")


def valid(text: str) -> bool:
    """
    Check whether a string looks like a color chromalite can parse.

    This is a syntactic pre-check only: hex codes must be ``#rgb`` or
    ``#rrggbb``, functional notations only need a known prefix (the values
    inside the parentheses are not checked), anything else must be a color name.

    >>> valid("#abc"), valid("#FOOOOD"), valid("mediumspringgreen")
    (True, False, True)
    """
    if not isinstance(text, str):
        return False

    if text.startswith("#"):
        return len(text) in (4, 7) and HEX_DIGITS.issuperset(text[1:])

    normalized = compact(text)
    if normalized.startswith(FUNCTIONAL_PREFIXES):
        return True
    return normalized in W3CX11
