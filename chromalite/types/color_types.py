from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple, Union

from ..errors import ColorDomainError

Scalar = int | float
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, float]
HSLTuple = Tuple[float, float, float]
HSVTuple = Tuple[float, float, float]
LabTuple = Tuple[float, float, float]
CMYKTuple = Tuple[float, float, float, float]
ScalarVector = Sequence[Scalar]


class ColorSpace(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSV = "hsv"
    LAB = "lab"
    CMYK = "cmyk"

    @property
    def arity(self) -> int:
        """Number of components a vector in this space carries."""
        return SPACE_ARITY[self]

    @classmethod
    def from_name(cls, space: ColorSpaceLike) -> ColorSpace:
        """
        Resolve a space tag from an enum member or a case-insensitive name.

        Raises:
            ColorDomainError: if the name is not a supported space.
        """
        if isinstance(space, cls):
            return space
        try:
            return cls(str(space).strip().lower())
        except ValueError as exc:
            raise ColorDomainError(f"Unsupported color space: {space!r}") from exc


ColorSpaceLike = Union[ColorSpace, str]

SPACE_ARITY = {
    ColorSpace.RGB: 3,
    ColorSpace.RGBA: 4,
    ColorSpace.HSL: 3,
    ColorSpace.HSV: 3,
    ColorSpace.LAB: 3,
    ColorSpace.CMYK: 4,
}
