"""Two-dimensional textures and their JSON form."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .entity import Entity, _require_str

_UINT32_MAX = (1 << 32) - 1


def _uint32(data: Mapping[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{key} must fit in 32 unsigned bits, got {value}")
    return value


class Texture2D(Entity):
    """A 2D texture: its source image path, size, channel count and pixel data."""

    DEFAULT_NAME = "DefaultTexture2D"

    def __init__(self) -> None:
        super().__init__()
        self.image_path: Path | None = None
        self.width = 0
        self.height = 0
        self.channels = 0
        self.pixels: bytes | None = None

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["imagePath"] = "" if self.image_path is None else str(self.image_path)
        data["width"] = self.width
        data["height"] = self.height
        data["channels"] = self.channels
        return data

    def load_json(self, data: Mapping[str, Any]) -> None:
        super().load_json(data)
        image_path = _require_str(data, "imagePath")
        width = _uint32(data, "width")
        height = _uint32(data, "height")
        channels = _uint32(data, "channels")
        self.image_path = Path(image_path) if image_path else None
        self.width = width
        self.height = height
        self.channels = channels

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Texture2D:
        """Build a texture description from its JSON object."""
        texture = cls()
        texture.load_json(data)
        return texture