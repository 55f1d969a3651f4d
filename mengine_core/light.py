"""Light sources and their JSON form."""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from typing import Any

from .entity import Entity, _require_str

Color = tuple[float, float, float]


class LightType(enum.Enum):
    """Kinds of light source."""

    DIRECTIONAL = 0
    POINT = 1
    SPOT = 2
    AREA = 3

    @property
    def label(self) -> str:
        """Name used in JSON documents, e.g. ``Directional``."""
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> LightType:
        for member in cls:
            if member.label == label:
                return member
        raise ValueError(f"unknown light type: {label!r}")


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be a number, got {type(value).__name__}")
    return float(value)


def _color(value: Any, key: str = "Color") -> Color:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 3:
        raise ValueError(f"{key} must hold exactly 3 numbers")
    red, green, blue = (_number(component, key) for component in value)
    return (red, green, blue)


class Light(Entity):
    """A light with a type, an RGB colour and an intensity."""

    def __init__(
        self,
        light_type: LightType = LightType.DIRECTIONAL,
        color: Sequence[float] = (1.0, 1.0, 1.0),
        intensity: float = 1.0,
    ) -> None:
        super().__init__()
        self.light_type = light_type
        self.color: Color = _color(color)
        self.intensity = _number(intensity, "Intensity")

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["Type"] = self.light_type.label
        data["Color"] = list(self.color)
        data["Intensity"] = self.intensity
        return data

    def load_json(self, data: Mapping[str, Any]) -> None:
        super().load_json(data)
        light_type = LightType.from_label(_require_str(data, "Type"))
        color = _color(data["Color"])
        intensity = _number(data["Intensity"], "Intensity")
        self.light_type = light_type
        self.color = color
        self.intensity = intensity

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Light:
        """Build a light from its JSON object."""
        light = cls()
        light.load_json(data)
        return light


class DirectionalLight(Light):
    """A light whose type is always ``DIRECTIONAL``."""

    def __init__(self, color: Sequence[float] = (1.0, 1.0, 1.0), intensity: float = 1.0) -> None:
        super().__init__(LightType.DIRECTIONAL, color, intensity)

    @property  # type: ignore[override]
    def light_type(self) -> LightType:
        return LightType.DIRECTIONAL

    @light_type.setter
    def light_type(self, value: LightType) -> None:
        if value is not LightType.DIRECTIONAL:
            raise ValueError("DirectionalLight can only be of type Directional.")