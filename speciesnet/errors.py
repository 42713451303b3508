"""Exception types raised by the speciesnet package."""

from __future__ import annotations

import math
from decimal import Decimal


def _format_number(value: float) -> str:
    """Format a number the shortest way, without exponent or trailing ``.0``."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class SpeciesNetError(Exception):
    """Base class of every error raised by this package."""


class InvalidTensorSizeError(SpeciesNetError, ValueError):
    """A tensor holds fewer values than a bounding box needs."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Invalid tensor size, expected 4, found {size}.")


class NegativeCoordinateError(SpeciesNetError, ValueError):
    """Coordinates, width or height were negative."""

    def __init__(self) -> None:
        super().__init__("Negative coordinates, width, and height are not allowed.")


class CategoryIndexOutOfRangeError(SpeciesNetError, ValueError):
    """A numeric category index is not 1, 2 or 3."""

    def __init__(self, value: float) -> None:
        self.value = float(value)
        super().__init__(
            "Category index out of range, expected passed category to be "
            f"`1`, `2`, or `3`, received {_format_number(self.value)}"
        )


class CategoryParseError(SpeciesNetError, ValueError):
    """A string could not be parsed into a category."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Failed to parse value {value} to Category.")


class ImageLoadError(SpeciesNetError):
    """An image could not be opened or decoded."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Image error: {message}")