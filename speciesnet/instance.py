"""Input instances: the images to run the models on."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def _optional_str(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"`{key}` must be a string or null")
    return value


@dataclass(frozen=True)
class Instance:
    """One image, with the country and region it was taken in when known."""

    file_path: Path
    country: Optional[str] = None
    admin1_region: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_path", Path(self.file_path))

    @classmethod
    def from_path(cls, file_path: PathLike) -> Instance:
        """An instance with only a file path."""
        return cls(Path(file_path))

    @classmethod
    def from_json(cls, data: Any) -> Instance:
        """Read an instance from its ``filepath``, ``country`` and ``admin1_region``."""
        if not isinstance(data, dict):
            raise TypeError("an instance must be a JSON object")
        if "filepath" not in data:
            raise ValueError("missing field `filepath`")
        file_path = data["filepath"]
        if not isinstance(file_path, str):
            raise TypeError("`filepath` must be a string")
        return cls(
            Path(file_path),
            _optional_str(data, "country"),
            _optional_str(data, "admin1_region"),
        )


@dataclass(frozen=True)
class Instances:
    """The contents of an instances file."""

    instances: tuple[Instance, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "instances", tuple(self.instances))

    def __iter__(self) -> Iterator[Instance]:
        return iter(self.instances)

    def __len__(self) -> int:
        return len(self.instances)

    @classmethod
    def from_json(cls, data: Any) -> Instances:
        """Read the ``instances`` array of a JSON object."""
        if not isinstance(data, dict):
            raise TypeError("instances must be a JSON object")
        if "instances" not in data:
            raise ValueError("missing field `instances`")
        items = data["instances"]
        if not isinstance(items, list):
            raise TypeError("`instances` must be an array")
        return cls(tuple(Instance.from_json(item) for item in items))

    @classmethod
    def load(cls, path: PathLike) -> Instances:
        """Read an instances JSON file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_json(json.load(handle))