"""Shared kernel with base classes and common concepts."""

from .entity import Entity, Prototype, new_entity_id, utc_now
from .value_objects import Selector

__all__: list[str] = [
    "Entity",
    "Prototype",
    "Selector",
    "new_entity_id",
    "utc_now",
]
