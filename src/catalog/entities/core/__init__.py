"""Shared base classes for catalog entities and tables."""

from ._base import Entity, EntityTable, SoftDeletableEntity, active_name_index, name_key
from .scope import RecordScope

__all__ = [
    "Entity",
    "EntityTable",
    "RecordScope",
    "SoftDeletableEntity",
    "active_name_index",
    "name_key",
]
