import math
import numbers
from fractions import Fraction
from typing import NamedTuple

from thumbnail_service.exceptions import InvalidDimensions


class Dimensions(NamedTuple):
    width: float
    height: float


def _validate(name: str, value) -> None:
    # bool is a numbers.Number, but True/False are never image sizes
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimensions(f"{name} must be a number, got {value!r}")
    if math.isnan(value) or math.isinf(value) or value <= 0:
        raise InvalidDimensions(f"{name} must be positive and finite, got {value!r}")


def calc_min_scalar(src_height, max_height, src_width, max_width) -> Fraction:
    """ Return the uniform multiplier that fits the source inside the box.

    Args:
        src_height, src_width: size of the original image in pixels.
        max_height, max_width: the bounded box the result must fit inside.

    Returns:
        Fraction: min(max_width / src_width, max_height / src_height), kept
            exact so that the limiting side lands exactly on its maximum.

    Raises:
        InvalidDimensions: if any input is zero, negative or not a number.
    """
    _validate('src_height', src_height)
    _validate('max_height', max_height)
    _validate('src_width', src_width)
    _validate('max_width', max_width)

    ratio_w = Fraction(max_width) / Fraction(src_width)
    ratio_h = Fraction(max_height) / Fraction(src_height)
    return min(ratio_w, ratio_h)


def scale(length, scalar) -> int:
    """ Apply the scalar to a single side, truncating toward zero.

    Truncation (not rounding) is intentional: 1080 * (200/1920) = 112.5 -> 112.
    """
    return math.floor(Fraction(length) * Fraction(scalar))


def scale_to_fit(src: Dimensions, max_box: Dimensions) -> Dimensions:
    """ Compute the largest box with the source aspect ratio inside max_box.

    Example: 1920x1080 inside 200x200 -> 200x112
    """
    scalar = calc_min_scalar(src.height, max_box.height, src.width, max_box.width)
    dest = Dimensions(scale(src.width, scalar), scale(src.height, scalar))

    # A very thin source (eg 10000x1 into 200x200) truncates to a zero side.
    if dest.width < 1 or dest.height < 1:
        raise InvalidDimensions(
            f"{src.width}x{src.height} cannot be scaled into "
            f"{max_box.width}x{max_box.height} without a zero-length side"
        )
    return dest
