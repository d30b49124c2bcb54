"""
Adapters giving EncryptedProxy uniform access to wrapped entities.
"""

from .adapters import FieldStore, MappingStore, ObjectStore, as_field_store

__all__ = ["FieldStore", "MappingStore", "ObjectStore", "as_field_store"]
