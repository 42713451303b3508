"""Post-processing of raw YOLO detector output."""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from .nms import nms

logger = logging.getLogger(__name__)

DEFAULT_CONF_THRESHOLD = 0.25
IOU_THRESHOLD = 0.45
MAX_DETECTIONS = 300
MAX_BOUNDING_BOX_HEIGHT = 7680
MAX_NMS_BOXES = 30000

_NUMBER_OF_CLASSES = 3
_MIN_COLUMNS = 5 + _NUMBER_OF_CLASSES


def _empty() -> np.ndarray:
    return np.empty((0, 6), dtype=np.float32)


def xywh_to_xyxy(tensor: Any) -> np.ndarray:
    """Convert rows of ``(center_x, center_y, width, height)`` to ``(x1, y1, x2, y2)``."""
    values = np.asarray(tensor, dtype=np.float32)
    if values.ndim != 2 or values.shape[1] < 4:
        raise ValueError("expected a two-dimensional array with at least four columns")
    two = np.float32(2.0)
    half_width = values[:, 2] / two
    half_height = values[:, 3] / two
    return np.stack(
        [
            values[:, 0] - half_width,
            values[:, 1] - half_height,
            values[:, 0] + half_width,
            values[:, 1] + half_height,
        ],
        axis=1,
    ).astype(np.float32)


def non_max_suppression(predictions: Any, conf_threshold: Optional[float] = None) -> np.ndarray:
    """Filter detector output to rows of ``(x1, y1, x2, y2, confidence, class)``.

    ``predictions`` has shape ``(batch, boxes, 5 + classes)``; only the first
    batch entry is used. A threshold outside ``[0, 1)`` falls back to the default.
    An array with no rows is returned when nothing survives.
    """
    values = np.asarray(predictions, dtype=np.float32)
    if values.ndim != 3:
        raise ValueError(f"expected a three-dimensional array, got {values.ndim} dimensions")
    if values.shape[0] == 0:
        raise ValueError("the batch is empty")
    if values.shape[2] < _MIN_COLUMNS:
        raise ValueError(
            f"expected at least {_MIN_COLUMNS} columns per box, got {values.shape[2]}"
        )

    if conf_threshold is not None and 0.0 <= conf_threshold < 1.0:
        threshold = np.float32(conf_threshold)
    else:
        threshold = np.float32(DEFAULT_CONF_THRESHOLD)

    logger.debug("output shape: %s", values.shape)

    view = values[0]
    tensor = view[view[:, 4] > threshold]
    if tensor.shape[0] == 0:
        logger.info("This image does not have any results.")
        return _empty()

    object_conf = tensor[:, 5:] * tensor[:, 4:5]
    tensor = np.concatenate([tensor[:, :5], object_conf], axis=1)

    bbox = xywh_to_xyxy(tensor)
    class_conf = tensor[:, 5:_MIN_COLUMNS]
    # The last of several equal maxima wins.
    best_class = (_NUMBER_OF_CLASSES - 1) - np.argmax(class_conf[:, ::-1], axis=1)
    conf = class_conf[np.arange(class_conf.shape[0]), best_class]

    result = np.column_stack([bbox, conf, best_class.astype(np.float32)]).astype(np.float32)
    result = result[conf > threshold]
    if result.shape[0] == 0:
        logger.info("This image does not have any results after confidence filtering.")
        return _empty()

    order = np.argsort(-result[:, 4], kind="stable")[:MAX_NMS_BOXES]
    result = result[order]

    offsets = result[:, 5:6] * np.float32(MAX_BOUNDING_BOX_HEIGHT)
    boxes = result[:, :4] + offsets
    keep = nms(boxes, result[:, 4], IOU_THRESHOLD)[:MAX_DETECTIONS]
    return result[keep]