"""A repository of PBR materials that refer to textures by identifier."""

from __future__ import annotations

import dataclasses
import logging
import os
from pathlib import Path

from .identifiers import UUID
from .material import PBRMaterial, PBRParams, PBRTextureFlags, TextureSlot
from .repository import Repository
from .texture import Texture2D
from .texture_repository import Texture2DRepository

_log = logging.getLogger(__name__)

# Descriptor bindings of the material set: the uniform buffer, then one per map.
PARAMETER_BINDING = 0
TEXTURE_BINDINGS: dict[TextureSlot, int] = {
    TextureSlot.ALBEDO: 1,
    TextureSlot.NORMAL: 2,
    TextureSlot.METALLIC_ROUGHNESS: 3,
    TextureSlot.AO: 4,
    TextureSlot.EMISSIVE: 5,
}


class PBRMaterialRepository(Repository[PBRMaterial]):
    """Materials keyed by identifier, resolving their maps through a texture repository.

    An empty texture identifier resolves to the texture repository's default texture.
    """

    def __init__(self, textures: Texture2DRepository) -> None:
        super().__init__(PBRMaterial)
        self._textures = textures

    def update(self, entity_id: UUID, delta: PBRMaterial) -> None:
        """Copy render type, parameters and texture maps from ``delta``.

        The texture flags are recomputed from which texture identifiers are set.
        Every referenced texture must exist in the texture repository.
        """
        if not self.check_entity(delta):
            raise ValueError("invalid material")
        material = self._entities.get(entity_id)
        if material is None:
            raise KeyError(f"Material with ID {entity_id} not exist")
        texture_ids = {slot: delta.texture_id(slot) for slot in TextureSlot}
        for slot, texture_id in texture_ids.items():
            if texture_id not in self._textures:
                raise KeyError(f"{slot.value} texture with ID {texture_id} not exist")
        material.render_type = delta.render_type
        material.params = PBRParams(dataclasses.replace(delta.params.parameters), PBRTextureFlags())
        for slot, texture_id in texture_ids.items():
            material.set_texture_id(slot, texture_id)

    def check_path(self, path: str | os.PathLike[str] | None) -> bool:
        """Whether ``path`` names an existing ``.mat`` file."""
        if path is None or os.fspath(path) == "":
            _log.error("Material path is empty!")
            return False
        candidate = Path(path)
        if not candidate.exists():
            _log.error("Material path does not exist: %s", candidate)
            return False
        if candidate.is_dir():
            _log.error("Material path is a directory: %s", candidate)
            return False
        if candidate.suffix != ".mat":
            _log.error("Material path is not a .mat file: %s", candidate)
            return False
        return True

    def check_entity(self, entity: PBRMaterial) -> bool:
        return True

    def _material(self, entity_id: UUID) -> PBRMaterial:
        material = self._entities.get(entity_id)
        if material is None:
            raise KeyError(f"Material with ID {entity_id} not exist")
        return material

    def uniform_data(self, entity_id: UUID) -> bytes:
        """The bytes the material's uniform buffer holds."""
        return self._material(entity_id).params.pack()

    def texture_bindings(self, entity_id: UUID) -> dict[int, Texture2D]:
        """The texture bound at each image binding of the material's descriptor set."""
        material = self._material(entity_id)
        bindings: dict[int, Texture2D] = {}
        for slot, binding in TEXTURE_BINDINGS.items():
            texture_id = material.texture_id(slot)
            texture = self._textures.get(texture_id)
            if texture is None:
                raise KeyError(f"{slot.value} texture with ID {texture_id} not exist")
            bindings[binding] = texture
        return bindings