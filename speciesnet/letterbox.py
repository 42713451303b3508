"""Resizing and padding images for the detector."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from .constants import DETECTOR_IMAGE_HEIGHT
from .image_reader import load_image
from .shape import Shape

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_U32_MAX = 2**32 - 1


def _round(value: float) -> float:
    """Round half away from zero."""
    if math.isnan(value) or math.isinf(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_u32(value: float) -> int:
    """Convert like a saturating float-to-unsigned cast."""
    number = float(value)
    if math.isnan(number) or number <= 0:
        return 0
    if number >= _U32_MAX:
        return _U32_MAX
    return int(number)


@dataclass(frozen=True)
class LetterboxOptions:
    """How to resize and pad an image."""

    shape: Shape = field(default_factory=lambda: Shape.square(640))
    scale_up: bool = True
    auto: bool = True
    stride: int = 64
    scale_fill: bool = False
    color: tuple[int, int, int] = (114, 114, 114)


@dataclass(frozen=True)
class LetterboxResult:
    """A resized and padded image with its original and final sizes."""

    image: Image.Image
    original_size: tuple[int, int]
    resized_size: tuple[int, int]


@dataclass(frozen=True)
class PreprocessedImage:
    """A letterboxed image and the path it was loaded from."""

    result: LetterboxResult
    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @property
    def image(self) -> Image.Image:
        return self.result.image

    @property
    def original_size(self) -> tuple[int, int]:
        return self.result.original_size

    @property
    def resized_size(self) -> tuple[int, int]:
        return self.result.resized_size

    def to_tensor(self) -> np.ndarray:
        """A float32 tensor shaped ``(1, 3, height, width)`` with values in ``[0, 1]``."""
        pixels = np.asarray(self.image.convert("RGB"), dtype=np.float32) / np.float32(255.0)
        return np.ascontiguousarray(pixels.transpose(2, 0, 1))[np.newaxis, ...]


def letterbox(image: Image.Image, options: Optional[LetterboxOptions] = None) -> LetterboxResult:
    """Resize an image to fit ``options.shape`` and pad it to meet the stride."""
    options = options or LetterboxOptions()
    f32 = np.float32
    rgb = image.convert("RGB")
    width, height = rgb.size
    target_width, target_height = options.shape.width, options.shape.height
    logger.debug("input size %s, target shape %s", rgb.size, (target_width, target_height))

    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = min(f32(target_width) / f32(width), f32(target_height) / f32(height))
    if not options.scale_up:
        ratio = min(ratio, f32(1.0))
    logger.debug("scale ratio is %s", ratio)

    unpad_width = f32(_round(float(f32(width) * ratio)))
    unpad_height = f32(_round(float(f32(height) * ratio)))

    pad_width = f32(target_height) - unpad_width
    pad_height = f32(target_width) - unpad_height

    if options.auto:
        stride = f32(options.stride)
        with np.errstate(divide="ignore", invalid="ignore"):
            pad_width = np.mod(pad_width, stride)
            pad_height = np.mod(pad_height, stride)
    elif options.scale_fill:
        unpad_width, unpad_height = f32(target_height), f32(target_width)

    pad_width = pad_width / f32(2.0)
    pad_height = pad_height / f32(2.0)

    if (width, height) != (_to_u32(_round(unpad_width)), _to_u32(_round(unpad_height))):
        logger.debug("resizing the image")
        rgb = rgb.resize((_to_u32(unpad_width), _to_u32(unpad_height)), Image.Resampling.BILINEAR)

    tenth = f32(0.1)
    top = _to_u32(_round(float(pad_height - tenth)))
    left = _to_u32(_round(float(pad_width - tenth)))
    bottom = _to_u32(_round(float(pad_height + tenth)))
    right = _to_u32(_round(float(pad_width + tenth)))

    if top == left == bottom == right == 0:
        return LetterboxResult(
            rgb, (width, height), (_to_u32(unpad_width), _to_u32(unpad_height))
        )

    logger.debug("padding top %d, left %d, bottom %d, right %d", top, left, bottom, right)
    canvas = Image.new(
        "RGB",
        (
            _to_u32(_round(unpad_width)) + left + right,
            _to_u32(_round(unpad_height)) + top + bottom,
        ),
        tuple(options.color),
    )
    canvas.paste(rgb, (left, top))
    return LetterboxResult(canvas, (width, height), canvas.size)


def preprocess(image_path: PathLike) -> PreprocessedImage:
    """Load an image and letterbox it to the detector's input size."""
    logger.info("Loading and decoding %s.", image_path)
    loaded = load_image(image_path)
    options = LetterboxOptions(shape=Shape.square(DETECTOR_IMAGE_HEIGHT))
    logger.info("Resizing and letterboxing the image.")
    return PreprocessedImage(letterbox(loaded, options), Path(image_path))