"""Base class for named objects identified by a UUID."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from .identifiers import UUID, UUIDGenerator

_generate_id = UUIDGenerator()


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


class Entity:
    """An object with an identifier and a display name.

    A new entity gets a fresh random identifier unless one is given.
    """

    DEFAULT_NAME: ClassVar[str] = "DefaultEntity"

    def __init__(self, id: UUID | None = None, name: str | None = None) -> None:
        self.id: UUID = id if id is not None else _generate_id()
        self.name: str = name if name is not None else self.DEFAULT_NAME

    def to_json(self) -> dict[str, Any]:
        """The identifier and name as a JSON object."""
        return {"id": str(self.id), "name": self.name}

    def load_json(self, data: Mapping[str, Any]) -> None:
        """Take ``id`` and ``name`` from a JSON object."""
        if not isinstance(data, Mapping):
            raise TypeError("entity data must be a JSON object")
        entity_id = UUID.parse(_require_str(data, "id"))
        name = _require_str(data, "name")
        self.id = entity_id
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={str(self.id)!r}, name={self.name!r})"