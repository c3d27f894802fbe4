import math
from typing import List

from ..errors import ColorParseError

DEGREE_SIGN = "°"


def compact(text: str) -> str:
    """Lower-case a notation and drop all whitespace."""
    return "".join(text.split()).lower()


def split_components(text: str, prefix: str, count: int) -> List[str]:
    """
    Strip ``prefix(`` and ``)`` from a functional notation and split it on commas.

    Raises:
        ColorParseError: if the notation is not ``prefix(...)`` or does not have
            exactly ``count`` components.
    """
    body = compact(text).replace(DEGREE_SIGN, "")
    opening = f"{prefix}("
    if not body.startswith(opening):
        raise ColorParseError(text, f"expected {opening!r}")
    if not body.endswith(")"):
        raise ColorParseError(text, "missing closing parenthesis")

    tokens = body[len(opening):-1].split(",")
    if len(tokens) != count:
        raise ColorParseError(text, f"{prefix} expects {count} components, got {len(tokens)}")
    return tokens


def parse_component(token: str, text: str) -> float:
    """Parse ``12.5`` as a float or ``12.5%`` as a ratio (0.125)."""
    is_percentage = token.endswith("%")
    number = token[:-1] if is_percentage else token
    try:
        value = float(number)
    except ValueError as exc:
        raise ColorParseError(text, f"invalid component {token!r}") from exc
    if not math.isfinite(value):
        raise ColorParseError(text, f"invalid component {token!r}")
    return value / 100 if is_percentage else value


def parse_components(text: str, prefix: str, count: int) -> List[float]:
    return [parse_component(token, text) for token in split_components(text, prefix, count)]
