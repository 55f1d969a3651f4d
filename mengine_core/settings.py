"""Window and descriptor-pool settings read from and written to JSON values."""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


class DescriptorType(enum.Enum):
    """Kinds of shader resource descriptor, with their Vulkan numbers."""

    SAMPLER = 0
    COMBINED_IMAGE_SAMPLER = 1
    SAMPLED_IMAGE = 2
    STORAGE_IMAGE = 3
    UNIFORM_TEXEL_BUFFER = 4
    STORAGE_TEXEL_BUFFER = 5
    UNIFORM_BUFFER = 6
    STORAGE_BUFFER = 7
    UNIFORM_BUFFER_DYNAMIC = 8
    STORAGE_BUFFER_DYNAMIC = 9
    INPUT_ATTACHMENT = 10


def _display_name(kind: DescriptorType) -> str:
    return "".join(part.capitalize() for part in kind.name.split("_"))


# Names accepted when reading settings; written names are the display names.
_CONFIG_NAMES: dict[str, DescriptorType] = {
    "e" + _display_name(kind): kind
    for kind in (
        DescriptorType.SAMPLER,
        DescriptorType.COMBINED_IMAGE_SAMPLER,
        DescriptorType.SAMPLED_IMAGE,
        DescriptorType.STORAGE_IMAGE,
        DescriptorType.UNIFORM_BUFFER,
        DescriptorType.STORAGE_BUFFER,
        DescriptorType.UNIFORM_BUFFER_DYNAMIC,
        DescriptorType.STORAGE_BUFFER_DYNAMIC,
    )
}


def _require_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be a number, got {type(value).__name__}")
    return int(value)


@dataclass
class WindowConfig:
    """Size and title of the main window."""

    width: int = 0
    height: int = 0
    title: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any], defaults: WindowConfig | None = None) -> WindowConfig:
        """Read ``Width``, ``Height`` and ``Title``, taking missing keys from ``defaults``."""
        if not isinstance(data, Mapping):
            raise TypeError("window settings must be a JSON object")
        base = defaults if defaults is not None else cls()
        width = _require_int(data.get("Width", base.width), "Width")
        height = _require_int(data.get("Height", base.height), "Height")
        title = data.get("Title", base.title)
        if not isinstance(title, str):
            raise TypeError(f"Title must be a string, got {type(title).__name__}")
        if width <= 0:
            raise ValueError("Window width must be positive")
        if height <= 0:
            raise ValueError("Window height must be positive")
        if not title:
            raise ValueError("Window title cannot be empty")
        return cls(width, height, title)

    def to_json(self) -> dict[str, Any]:
        return {"Width": self.width, "Height": self.height, "Title": self.title}


def _default_proportion() -> list[tuple[DescriptorType, float]]:
    return [
        (DescriptorType.SAMPLER, 0.5),
        (DescriptorType.COMBINED_IMAGE_SAMPLER, 4.0),
        (DescriptorType.SAMPLED_IMAGE, 4.0),
        (DescriptorType.STORAGE_IMAGE, 1.0),
        (DescriptorType.UNIFORM_BUFFER, 2.0),
        (DescriptorType.STORAGE_BUFFER, 2.0),
        (DescriptorType.UNIFORM_BUFFER_DYNAMIC, 1.0),
        (DescriptorType.STORAGE_BUFFER_DYNAMIC, 1.0),
    ]


@dataclass
class PoolSizesProportion:
    """Relative number of descriptors of each type in a descriptor pool."""

    proportion: list[tuple[DescriptorType, float]] = field(default_factory=_default_proportion)

    @classmethod
    def from_json(cls, data: Sequence[Mapping[str, Any]]) -> PoolSizesProportion:
        """Read a list of ``{"type": "eUniformBuffer", "value": 2.0}`` entries."""
        entries = []
        for entry in data:
            type_name = entry["type"]
            if not isinstance(type_name, str):
                raise TypeError("descriptor type must be a string")
            try:
                kind = _CONFIG_NAMES[type_name]
            except KeyError:
                raise ValueError(f"unknown descriptor type: {type_name}") from None
            value = entry["value"]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError("descriptor proportion must be a number")
            entries.append((kind, float(value)))
        return cls(entries)

    def to_json(self) -> list[dict[str, Any]]:
        return [{"type": _display_name(kind), "value": value} for kind, value in self.proportion]