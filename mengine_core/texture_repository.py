"""A repository of 2D textures loaded from PNG images."""

from __future__ import annotations

import functools
import logging
import os
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .identifiers import UUID
from .repository import Repository
from .texture import Texture2D

_log = logging.getLogger(__name__)

_DEFAULT_SIZE = 4096
_CHANNELS = 4


@functools.lru_cache(maxsize=4)
def checker_board(width: int = _DEFAULT_SIZE, height: int = _DEFAULT_SIZE, grid: int = 8) -> bytes:
    """RGBA pixels of a black and white checker board, white in the top-left tile.

    Tiles are ``width // grid`` pixels square; every alpha value is 255.
    """
    if width <= 0 or height <= 0 or grid <= 0:
        raise ValueError("width, height and grid must be positive")
    tile = width // grid
    if tile == 0:
        raise ValueError("grid must not exceed width")
    rows = (np.arange(height) // tile) % 2
    cols = (np.arange(width) // tile) % 2
    color = np.where(rows[:, None] == cols[None, :], 255, 0).astype(np.uint8)
    pixels = np.empty((height, width, _CHANNELS), dtype=np.uint8)
    pixels[..., :3] = color[..., None]
    pixels[..., 3] = 255
    return pixels.tobytes()


class Texture2DRepository(Repository[Texture2D]):
    """Textures keyed by identifier; the empty identifier holds a checker-board default."""

    def __init__(self) -> None:
        super().__init__(Texture2D)
        self._checker_board = checker_board()
        default = self.create()
        self._entities[UUID()] = self._entities.pop(default.id)

    def create(self) -> Texture2D:
        """Store a new 4096x4096 RGBA texture showing the checker board."""
        texture = Texture2D()
        texture.width = _DEFAULT_SIZE
        texture.height = _DEFAULT_SIZE
        texture.channels = _CHANNELS
        texture.pixels = self._checker_board
        self._entities[texture.id] = texture
        return texture

    def update(self, entity_id: UUID, delta: Texture2D) -> None:
        """Reload the stored texture from ``delta.image_path``.

        The image is converted to RGBA and flipped so its bottom row comes first.
        """
        if not self.check_entity(delta):
            raise ValueError(f"invalid texture image path: {delta.image_path}")
        texture = self._entities.get(entity_id)
        if texture is None:
            raise KeyError(f"Texture with ID {entity_id} not exist")
        texture.image_path = delta.image_path
        assert delta.image_path is not None
        try:
            with Image.open(delta.image_path) as source:
                image = source.convert("RGBA").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError(f"Failed to load texture image: {delta.image_path}") from exc
        texture.width, texture.height = image.size
        texture.channels = _CHANNELS
        texture.pixels = image.tobytes()

    def check_path(self, path: str | os.PathLike[str] | None) -> bool:
        """Whether ``path`` names an existing ``.png`` file."""
        if path is None or os.fspath(path) == "":
            _log.error("Texture path is empty!")
            return False
        candidate = Path(path)
        if not candidate.exists():
            _log.error("Texture path does not exist: %s", candidate)
            return False
        if candidate.is_dir():
            _log.error("Texture path is a directory: %s", candidate)
            return False
        if candidate.suffix != ".png":
            _log.error("Texture path is not a png file: %s", candidate)
            return False
        return True

    def check_entity(self, entity: Texture2D) -> bool:
        return self.check_path(entity.image_path)