"""Physically based materials: parameters, texture slots and JSON form."""

from __future__ import annotations

import dataclasses
import enum
import struct
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .entity import Entity, _require_str
from .identifiers import UUID

Vec3 = tuple[float, float, float]

# Uniform layout: vec3 albedo (16-aligned), four floats, padding to 32,
# five uint32 flags, padding to a 64-byte struct.
_UNIFORM_LAYOUT = struct.Struct("<3f4f4x5I12x")


class RenderType(enum.Enum):
    """Render path a material is drawn with."""

    FORWARD_OPAQUE_PBR = "ForwardOpaquePBR"
    FORWARD_TRANSPARENT_PBR = "ForwardTransparentPBR"
    FORWARD_OPAQUE_PHONG = "ForwardOpaquePhong"
    FORWARD_TRANSPARENT_PHONG = "ForwardTransparentPhong"
    DEFERRED = "Deferred"


class TextureSlot(enum.Enum):
    """Texture maps a PBR material can use."""

    ALBEDO = "AlbedoMap"
    NORMAL = "NormalMap"
    METALLIC_ROUGHNESS = "MetallicRoughnessMap"
    AO = "AOMap"
    EMISSIVE = "EmissiveMap"


_FLAG_FIELDS = {
    TextureSlot.ALBEDO: "use_albedo_map",
    TextureSlot.NORMAL: "use_normal_map",
    TextureSlot.METALLIC_ROUGHNESS: "use_metallic_roughness_map",
    TextureSlot.AO: "use_ao_map",
    TextureSlot.EMISSIVE: "use_emissive_map",
}


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be a number, got {type(value).__name__}")
    return float(value)


def _vec3(value: Any, key: str) -> Vec3:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 3:
        raise ValueError(f"{key} must hold exactly 3 numbers")
    x, y, z = (_number(component, key) for component in value)
    return (x, y, z)


@dataclass
class PBRParameters:
    """Scalar surface parameters."""

    albedo: Vec3 = (1.0, 1.0, 1.0)
    metallic: float = 0.5
    roughness: float = 0.5
    ao: float = 1.0
    emissive: float = 0.0


@dataclass
class PBRTextureFlags:
    """Whether each texture map is in use (1) or not (0)."""

    use_albedo_map: int = 0
    use_normal_map: int = 0
    use_metallic_roughness_map: int = 0
    use_ao_map: int = 0
    use_emissive_map: int = 0

    def __getitem__(self, slot: TextureSlot) -> int:
        return getattr(self, _FLAG_FIELDS[slot])

    def __setitem__(self, slot: TextureSlot, value: int) -> None:
        setattr(self, _FLAG_FIELDS[slot], value)


@dataclass
class PBRParams:
    """Everything a material uploads to its uniform buffer."""

    parameters: PBRParameters = field(default_factory=PBRParameters)
    texture_flags: PBRTextureFlags = field(default_factory=PBRTextureFlags)

    def pack(self) -> bytes:
        """The uniform-buffer bytes, little-endian, 64 bytes long."""
        p = self.parameters
        f = self.texture_flags
        return _UNIFORM_LAYOUT.pack(
            *p.albedo,
            p.metallic,
            p.roughness,
            p.ao,
            p.emissive,
            f.use_albedo_map,
            f.use_normal_map,
            f.use_metallic_roughness_map,
            f.use_ao_map,
            f.use_emissive_map,
        )


def _texture_entries(textures: Any) -> Iterable[Any]:
    if isinstance(textures, Mapping):
        return textures.values()
    if isinstance(textures, (str, bytes)) or not isinstance(textures, Sequence):
        raise TypeError("Textures must be a JSON array or object")
    return textures


class PBRMaterial(Entity):
    """A PBR material referring to its texture maps by identifier."""

    DEFAULT_NAME = "DefaultPBRMaterial"

    def __init__(self) -> None:
        super().__init__()
        self.render_type = RenderType.FORWARD_OPAQUE_PBR
        self.params = PBRParams()
        self._textures: dict[TextureSlot, UUID] = {slot: UUID() for slot in TextureSlot}

    def texture_id(self, slot: TextureSlot) -> UUID:
        """Identifier of the texture in ``slot``; empty when unset."""
        return self._textures[slot]

    def set_texture_id(self, slot: TextureSlot, texture_id: UUID) -> None:
        """Assign a texture and switch the slot's flag on, or off for an empty id."""
        self._textures[slot] = texture_id
        self.params.texture_flags[slot] = 0 if texture_id.is_empty() else 1

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        data["RenderType"] = self.render_type.value
        data["Textures"] = {slot.value: str(self._textures[slot]) for slot in TextureSlot}
        return data

    def load_json(self, data: Mapping[str, Any]) -> None:
        """Read the entity fields, render type, parameters and texture entries.

        Each texture entry is an object with ``Type`` and ``ID``; a slot that
        was empty before is switched on.
        """
        super().load_json(data)
        render_type = RenderType(_require_str(data, "RenderType"))
        parameters = PBRParameters(
            albedo=_vec3(data["Albedo"], "Albedo"),
            metallic=_number(data["Metallic"], "Metallic"),
            roughness=_number(data["Roughness"], "Roughness"),
            ao=_number(data["AO"], "AO"),
            emissive=_number(data["Emissive"], "Emissive"),
        )
        textures = dict(self._textures)
        flags = dataclasses.replace(self.params.texture_flags)
        for entry in _texture_entries(data["Textures"]):
            if not isinstance(entry, Mapping):
                raise TypeError("texture entry must be a JSON object")
            type_name = _require_str(entry, "Type")
            texture_id = UUID.parse(_require_str(entry, "ID"))
            try:
                slot = TextureSlot(type_name)
            except ValueError:
                raise ValueError(f"Unknown texture type: {type_name}") from None
            if textures[slot].is_empty():
                flags[slot] = 1
            textures[slot] = texture_id
        self.render_type = render_type
        self.params = PBRParams(parameters, flags)
        self._textures = textures

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> PBRMaterial:
        """Build a material from its JSON object."""
        material = cls()
        material.load_json(data)
        return material