"""Bounding boxes of detections."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from .errors import InvalidTensorSizeError, _format_number

_EXPECTED_TENSOR_SIZE = 4


def _tensor_values(tensor: Any) -> np.ndarray:
    array = np.asarray(tensor, dtype=np.float32)
    if array.ndim == 0:
        raise InvalidTensorSizeError(0)
    if array.ndim != 1:
        raise ValueError(f"expected a one-dimensional tensor, got {array.ndim} dimensions")
    if array.shape[0] < _EXPECTED_TENSOR_SIZE:
        raise InvalidTensorSizeError(array.shape[0])
    return array


def _clamp(value: float, low: float, high: float) -> float:
    if math.isnan(value):
        return value
    return min(max(value, low), high)


@dataclass(frozen=True)
class BoundingBox:
    """Box given by its top-left ``(x1, y1)`` and bottom-right ``(x2, y2)`` corners."""

    x1: float
    y1: float
    x2: float
    y2: float

    def __str__(self) -> str:
        return (
            f"(x1 = {_format_number(self.x1)}, y1 = {_format_number(self.y1)}, "
            f"x2 = {_format_number(self.x2)}, y2 = {_format_number(self.y2)})"
        )

    @classmethod
    def from_xywh_coordinates(
        cls, center_x: float, center_y: float, width: float, height: float
    ) -> BoundingBox:
        """Build a box from its centre, width and height."""
        return cls(
            center_x - width / 2.0,
            center_y - height / 2.0,
            center_x + width / 2.0,
            center_y + height / 2.0,
        )

    @classmethod
    def from_megadetector_coordinates(
        cls, min_x: float, min_y: float, width: float, height: float
    ) -> BoundingBox:
        """Build a box from its top-left corner, width and height."""
        return cls(min_x, min_y, min_x + width, min_y + height)

    @classmethod
    def from_xyxy_tensor(cls, tensor: Any) -> BoundingBox:
        """Build a box from a float32 vector ``(x1, y1, x2, y2)``."""
        x1, y1, x2, y2 = _tensor_values(tensor)[:_EXPECTED_TENSOR_SIZE]
        return cls(float(x1), float(y1), float(x2), float(y2))

    @classmethod
    def from_xywh_tensor(cls, tensor: Any) -> BoundingBox:
        """Build a box from a float32 vector ``(center_x, center_y, width, height)``."""
        center_x, center_y, width, height = _tensor_values(tensor)[:_EXPECTED_TENSOR_SIZE]
        two = np.float32(2.0)
        return cls(
            float(center_x - width / two),
            float(center_y - height / two),
            float(center_x + width / two),
            float(center_y + height / two),
        )

    @classmethod
    def from_json(cls, value: Any) -> BoundingBox:
        """Read a box stored as ``[min_x, min_y, width, height]``."""
        if not isinstance(value, (list, tuple)):
            raise TypeError("a bounding box must be an array of numbers")
        if len(value) != _EXPECTED_TENSOR_SIZE:
            raise ValueError(
                f"invalid length {len(value)}, expected an array with length of 4."
            )
        for item in value:
            if isinstance(item, bool) or not isinstance(item, numbers.Real):
                raise TypeError(f"invalid bounding box value {item!r}, expected a number")
        min_x, min_y, width, height = (float(item) for item in value)
        return cls.from_megadetector_coordinates(min_x, min_y, width, height)

    def to_json(self) -> list[float]:
        """The box as ``[min_x, min_y, width, height]``."""
        return list(self.as_megadetector())

    def area(self) -> float:
        return (self.x2 - self.x1) * (self.y2 - self.y1)

    def as_xyxy(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    def as_xywh(self) -> tuple[float, float, float, float]:
        center_x = self.x1 + self.x2 / 2.0
        center_y = self.y1 + self.y2 / 2.0
        return (center_x, center_y, self.x2 - self.x1, self.y2 - self.y1)

    def as_megadetector(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2 - self.x1, self.y2 - self.y1)

    def normalize(self, width: int, height: int) -> BoundingBox:
        """Divide the coordinates by the image width and height."""
        return replace(
            self,
            x1=self.x1 / width,
            y1=self.y1 / height,
            x2=self.x2 / width,
            y2=self.y2 / height,
        )

    def scale_to(
        self, resized_width: int, resized_height: int, width: int, height: int
    ) -> BoundingBox:
        """Map the box from a letterboxed image back onto the original and clip it."""
        resized_w = np.float32(resized_width)
        resized_h = np.float32(resized_height)
        original_w = np.float32(width)
        original_h = np.float32(height)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            gain = min(resized_w / original_w, resized_h / original_h)
            pad_x = (resized_h - original_h * gain) / np.float32(2.0)
            pad_y = (resized_w - original_w * gain) / np.float32(2.0)
        gain_f = float(gain)
        pad_x_f = float(pad_x)
        pad_y_f = float(pad_y)

        def scaled(value: float, pad: float, limit: int) -> float:
            with np.errstate(divide="ignore", invalid="ignore"):
                result = float(np.float64(value - pad) / np.float64(gain_f))
            return _clamp(result, 0.0, float(limit))

        return replace(
            self,
            x1=scaled(self.x1, pad_x_f, width),
            y1=scaled(self.y1, pad_y_f, height),
            x2=scaled(self.x2, pad_x_f, width),
            y2=scaled(self.y2, pad_y_f, height),
        )