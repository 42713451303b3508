"""Target image shapes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Shape:
    """Width and height of an image."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("shape dimensions must not be negative")

    @classmethod
    def square(cls, length: int) -> Shape:
        """A shape whose width and height are both ``length``."""
        return cls(length, length)

    @classmethod
    def rectangular(cls, width: int, height: int) -> Shape:
        """A shape with the given width and height."""
        return cls(width, height)