"""Loading images from disk as RGB."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from .errors import ImageLoadError

_JPEG_EXTENSIONS = {"jpg", "jpeg"}


def load_image(path: Union[str, "os.PathLike[str]"]) -> Image.Image:
    """Load the image at ``path`` as an RGB image.

    Files ending in ``.jpg`` or ``.jpeg`` must hold JPEG data; other files are
    decoded by whatever format their contents have.
    """
    file_path = Path(path)
    extension = file_path.suffix.lstrip(".").lower()
    if not file_path.suffix:
        raise ImageLoadError("File extension not found")

    formats = ["JPEG"] if extension in _JPEG_EXTENSIONS else None
    try:
        with Image.open(file_path, formats=formats) as image:
            image.load()
            return image.convert("RGB")
    except UnidentifiedImageError as error:
        raise ImageLoadError(str(error)) from error
    except (OSError, SyntaxError, ValueError) as error:
        if isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
            raise
        raise ImageLoadError(str(error)) from error