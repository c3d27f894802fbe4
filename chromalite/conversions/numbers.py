from ..errors import ColorDomainError
from ..types.color_types import RGBTuple

MAX_NUM = 0xFFFFFF


def rgb_to_num(r: int, g: int, b: int) -> int:
    """Pack RGB bytes into a 24-bit integer ``0xRRGGBB``."""
    return (int(r) & 0xFF) << 16 | (int(g) & 0xFF) << 8 | (int(b) & 0xFF)


def num_to_rgb(num: int) -> RGBTuple:
    """
    Unpack a 24-bit integer ``0xRRGGBB`` into RGB bytes.

    Raises:
        ColorDomainError: if ``num`` is negative or larger than 0xFFFFFF.
    """
    if not 0 <= num <= MAX_NUM:
        raise ColorDomainError(f"{num!r} is not a 24-bit RGB number (0 to 0xFFFFFF)")
    return (num >> 16) & 0xFF, (num >> 8) & 0xFF, num & 0xFF
