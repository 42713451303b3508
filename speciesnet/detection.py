"""Detections produced by the detector."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

from .bounding_box import BoundingBox
from .category import Category
from .errors import _format_number


@dataclass(frozen=True)
class Detection:
    """A detected object: its category, confidence and bounding box."""

    category: Category
    confidence: float
    bounding_box: BoundingBox

    def __str__(self) -> str:
        return (
            f"Category: {self.category}, Confidence: {_format_number(self.confidence)}, "
            f"Bounding box: {self.bounding_box}"
        )

    def label(self) -> str:
        """The category's label."""
        return str(self.category)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Detection:
        """Read a detection from its ``category``, ``conf`` and ``bbox`` fields."""
        if not isinstance(data, dict):
            raise TypeError("a detection must be a JSON object")
        for field in ("category", "conf", "bbox"):
            if field not in data:
                raise ValueError(f"missing field `{field}`")
        confidence = data["conf"]
        if isinstance(confidence, bool) or not isinstance(confidence, numbers.Real):
            raise TypeError(f"invalid confidence {confidence!r}, expected a number")
        return cls(
            category=Category.from_json(data["category"]),
            confidence=float(confidence),
            bounding_box=BoundingBox.from_json(data["bbox"]),
        )

    def to_json(self) -> dict[str, Any]:
        """The detection as a JSON-ready mapping."""
        return {
            "category": self.category.index(),
            "label": self.category.to_json(),
            "conf": self.confidence,
            "bbox": self.bounding_box.to_json(),
        }