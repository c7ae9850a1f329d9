"""Actors on the map: the player and monsters, kept in an append-only registry."""
from .entity import Entity, EntitySnapshot
from .registry import EntityRegistry

__all__ = ["Entity", "EntitySnapshot", "EntityRegistry"]
