"""Non-max suppression over scored boxes."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)

_ONE = np.float32(1.0)
_ZERO = np.float32(0.0)


def _iou_many(box: np.ndarray, others: np.ndarray) -> np.ndarray:
    """Intersection over union of ``box`` against each row of ``others``, in float32."""
    box_area = (box[2] - box[0] + _ONE) * (box[3] - box[1] + _ONE)
    other_area = (others[:, 2] - others[:, 0] + _ONE) * (others[:, 3] - others[:, 1] + _ONE)

    i_x1 = np.fmax(box[0], others[:, 0])
    i_y1 = np.fmax(box[1], others[:, 1])
    i_x2 = np.fmin(box[2], others[:, 2])
    i_y2 = np.fmin(box[3], others[:, 3])

    i_width = np.fmax(i_x2 - i_x1 + _ONE, _ZERO)
    i_height = np.fmax(i_y2 - i_y1 + _ONE, _ZERO)
    i_area = i_width * i_height

    with np.errstate(divide="ignore", invalid="ignore"):
        return (i_area / (box_area + other_area - i_area)).astype(np.float32)


def _as_boxes(values: Any) -> np.ndarray:
    boxes = np.asarray(values, dtype=np.float32)
    if boxes.ndim == 1:
        boxes = boxes[np.newaxis, :]
    if boxes.ndim != 2 or boxes.shape[1] < 4:
        raise ValueError("boxes must have four coordinates (x1, y1, x2, y2)")
    return boxes


def iou(a: Any, b: Any) -> float:
    """Intersection over union of two ``(x1, y1, x2, y2)`` boxes with inclusive pixel edges."""
    first = _as_boxes(a)[0]
    second = _as_boxes(b)[:1]
    return float(_iou_many(first, second)[0])


def nms(detections: Any, scores: Any, iou_threshold: float) -> list[int]:
    """Indices of the boxes kept by non-max suppression, highest score first."""
    score_values = np.asarray(scores, dtype=np.float32)
    if score_values.ndim != 1:
        raise ValueError("scores must be a one-dimensional array")
    if score_values.size == 0:
        return []

    boxes = _as_boxes(detections)
    if boxes.shape[0] < score_values.size:
        raise ValueError("there are more scores than boxes")

    threshold = np.float32(iou_threshold)
    remaining = np.argsort(score_values, kind="stable")
    keep: list[int] = []

    while remaining.size:
        index = int(remaining[-1])
        keep.append(index)
        remaining = remaining[:-1]
        if remaining.size:
            overlaps = _iou_many(boxes[index], boxes[remaining])
            remaining = remaining[~(overlaps > threshold)]

    logger.debug("kept indices: %s", keep)
    return keep