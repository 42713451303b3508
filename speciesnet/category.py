"""Detector categories."""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any

from .errors import CategoryIndexOutOfRangeError, CategoryParseError


class Category(Enum):
    """What a detection shows; the value is its index as a string."""

    ANIMAL = "1"
    HUMAN = "2"
    VEHICLE = "3"

    def __str__(self) -> str:
        return self.name.lower()

    def index(self) -> str:
        """The category's index, ``"1"``, ``"2"`` or ``"3"``."""
        return self.value

    @classmethod
    def parse(cls, value: str) -> Category:
        """Parse a category index given as text."""
        lowered = value.lower()
        try:
            return cls(lowered)
        except ValueError:
            raise CategoryParseError(lowered) from None

    @classmethod
    def from_number(cls, value: Any) -> Category:
        """Convert a numeric index, 1, 2 or 3, to a category."""
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"expected a number, got {type(value).__name__}")
        number = float(value)
        if number in (1.0, 2.0, 3.0):
            return cls(str(int(number)))
        raise CategoryIndexOutOfRangeError(number)

    @classmethod
    def from_json(cls, value: Any) -> Category:
        """Read a category stored as the string ``"1"``, ``"2"`` or ``"3"``."""
        if not isinstance(value, str):
            raise TypeError(f"invalid category {value!r}, expected `1`, `2`, or `3`.")
        try:
            return cls(value)
        except ValueError:
            raise CategoryParseError(value) from None

    def to_json(self) -> str:
        """The category's label, as written to output files."""
        return str(self)