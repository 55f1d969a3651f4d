"""Identifiers, entities, materials, textures, repositories and a task scheduler for a small renderer."""

__version__ = "0.1.0"