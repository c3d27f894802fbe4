from typing import Sequence

from ..errors import ColorParseError
from ..types.color_types import RGBATuple
from ..utils.num_utils import round_half_away, round_to

HEX_DIGITS = frozenset("0123456789abcdef")


def rgb_to_hex(rgba: Sequence[float]) -> str:
    """
    Format RGB(A) bytes as a lowercase hex code.

    Args:
        rgba: (r, g, b) or (r, g, b, alpha) with channels in [0, 255] and alpha in [0, 1]

    Returns:
        ``#rrggbb``, or ``#rrggbbaa`` when alpha is below 1.0
    """
    r, g, b = (int(c) for c in rgba[:3])
    alpha = rgba[3] if len(rgba) > 3 else 1.0
    code = f"#{r:02x}{g:02x}{b:02x}"
    if alpha < 1.0:
        code += f"{round_half_away(alpha * 255):02x}"
    return code


def hex_to_rgb(code: str) -> RGBATuple:
    """
    Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` into (r, g, b, alpha).

    Short codes expand each nibble by duplication. A trailing alpha byte is
    divided by 255 and rounded to 2 decimals. The ``#`` is optional.

    Raises:
        ColorParseError: on a wrong length or a non-hex digit.
    """
    digits = code.strip().lower()
    if digits.startswith("#"):
        digits = digits[1:]
    if not digits or not HEX_DIGITS.issuperset(digits):
        raise ColorParseError(code, "invalid hex digits")

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    if len(digits) == 6:
        alpha = 1.0
    elif len(digits) == 8:
        alpha = round_to(int(digits[6:8], 16) / 255, 2)
    else:
        raise ColorParseError(code, f"hex code must have 3, 6 or 8 digits, got {len(digits)}")

    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16), alpha
