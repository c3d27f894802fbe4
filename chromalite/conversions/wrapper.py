from typing import Callable, Sequence, Tuple

from ..errors import ColorDomainError
from ..types.color_types import ColorSpace, ColorSpaceLike, RGBATuple, Scalar
from ..utils.num_utils import clamp_byte, clamp_unit
from .cmyk import cmyk_to_rgb, rgb_to_cmyk
from .lab import lab_to_rgb, rgb_to_lab
from .to_hsl import rgb_to_hsl
from .to_hsv import rgb_to_hsv
from .to_rgb import hsl_to_rgb, hsv_to_rgb


def _bytes(r: Scalar, g: Scalar, b: Scalar) -> Tuple[int, int, int]:
    return clamp_byte(r), clamp_byte(g), clamp_byte(b)


# Every space routes through RGBA; alpha only survives an rgba -> rgba hop.
TO_RGBA: dict[ColorSpace, Callable[[Sequence[Scalar]], RGBATuple]] = {
    ColorSpace.RGB: lambda v: (*_bytes(*v), 1.0),
    ColorSpace.RGBA: lambda v: (*_bytes(*v[:3]), clamp_unit(v[3])),
    ColorSpace.HSL: lambda v: (*hsl_to_rgb(*v), 1.0),
    ColorSpace.HSV: lambda v: (*hsv_to_rgb(*v), 1.0),
    ColorSpace.LAB: lambda v: (*_bytes(*lab_to_rgb(*v)), 1.0),
    ColorSpace.CMYK: lambda v: (*cmyk_to_rgb(*v), 1.0),
}

FROM_RGBA: dict[ColorSpace, Callable[[RGBATuple], Tuple[Scalar, ...]]] = {
    ColorSpace.RGB: lambda c: c[:3],
    ColorSpace.RGBA: lambda c: c,
    ColorSpace.HSL: lambda c: rgb_to_hsl(*c[:3]),
    ColorSpace.HSV: lambda c: rgb_to_hsv(*c[:3]),
    ColorSpace.LAB: lambda c: rgb_to_lab(*c[:3]),
    ColorSpace.CMYK: lambda c: rgb_to_cmyk(*c[:3]),
}


def convert(
    color: Sequence[Scalar],
    from_space: ColorSpaceLike,
    to_space: ColorSpaceLike,
) -> Tuple[Scalar, ...]:
    """
    Convert a color vector from one space to another.

    Args:
        color: Components in ``from_space`` (rgb/rgba channels as bytes, alpha and
            hsl/hsv/cmyk ratios in [0, 1], hue in degrees, Lab as L*a*b*)
        from_space: Source space tag, e.g. "hsl"
        to_space: Target space tag, e.g. "lab"

    Returns:
        Tuple of components in ``to_space``

    Raises:
        ColorDomainError: on an unknown space or a vector of the wrong arity.
    """
    src = ColorSpace.from_name(from_space)
    dst = ColorSpace.from_name(to_space)
    values = tuple(color)

    if len(values) != src.arity:
        raise ColorDomainError(
            f"{src.value} expects {src.arity} components, got {len(values)}"
        )

    if src == dst:
        return values

    return tuple(FROM_RGBA[dst](TO_RGBA[src](values)))
