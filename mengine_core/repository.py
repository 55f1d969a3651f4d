"""In-memory stores of entities keyed by UUID, with JSON file storage."""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .entity import Entity
from .identifiers import UUID

E = TypeVar("E", bound=Entity)


class Repository(ABC, Generic[E]):
    """Holds entities of one type by identifier.

    Subclasses decide what makes a file path or an entity acceptable and how
    an update is applied to a stored entity.
    """

    def __init__(self, entity_type: type[E]) -> None:
        self._entity_type = entity_type
        self._entities: dict[UUID, E] = {}

    def create(self) -> E:
        """Make a new entity, store it and apply it to itself as an update.

        If that update fails the entity is removed again and the error raised.
        """
        entity = self._entity_type()
        self._entities[entity.id] = entity
        try:
            self.update(entity.id, entity)
        except Exception:
            del self._entities[entity.id]
            raise
        return entity

    def get(self, entity_id: UUID) -> E | None:
        """The entity stored under ``entity_id``, or ``None``."""
        return self._entities.get(entity_id)

    def get_all(self) -> list[E]:
        return list(self._entities.values())

    def get_by_name(self, name: str) -> list[E]:
        """All entities whose name is exactly ``name``."""
        return [entity for entity in self._entities.values() if entity.name == name]

    @abstractmethod
    def update(self, entity_id: UUID, delta: E) -> None:
        """Apply ``delta`` to the stored entity.

        Raises ``ValueError`` if ``delta`` is not acceptable and ``KeyError``
        if nothing is stored under ``entity_id``.
        """

    def delete(self, entity_id: UUID) -> None:
        """Remove the entity stored under ``entity_id``; ``KeyError`` if absent."""
        try:
            del self._entities[entity_id]
        except KeyError:
            raise KeyError(f"no entity with ID {entity_id}") from None

    def save_to_file(self, path: str | os.PathLike[str], entity: E) -> None:
        """Write ``entity`` as indented JSON to a path that passes ``check_path``."""
        if not self.check_path(path):
            raise ValueError(f"Failed to save entity to file: {os.fspath(path)}")
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(entity.to_json(), handle, indent=4)

    def load_from_file(self, path: str | os.PathLike[str]) -> E:
        """Read an entity from JSON and return the stored entity with its identifier.

        An entity already stored under that identifier is returned unchanged;
        otherwise a new one is stored and the loaded data applied to it.
        """
        if not self.check_path(path):
            raise ValueError(f"Failed to load entity from file: {os.fspath(path)}")
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        loaded = self._entity_type()
        loaded.load_json(data)
        existing = self._entities.get(loaded.id)
        if existing is not None:
            return existing
        entity = self._entity_type()
        entity.id = loaded.id
        entity.name = loaded.name
        self._entities[loaded.id] = entity
        try:
            self.update(loaded.id, loaded)
        except Exception:
            del self._entities[loaded.id]
            raise
        return entity

    @abstractmethod
    def check_path(self, path: str | os.PathLike[str] | None) -> bool:
        """Whether ``path`` is a file this repository can store entities in."""

    @abstractmethod
    def check_entity(self, entity: E) -> bool:
        """Whether ``entity`` is acceptable as an update."""

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities