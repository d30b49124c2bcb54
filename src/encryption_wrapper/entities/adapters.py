"""
Inner entity adapters.

The proxy never touches the wrapped entity directly. It goes through a
FieldStore, a small accessor contract covering field get/set, existence,
removal and method invocation. Adapters are provided for plain objects
(attribute access) and mutable mappings (item access).
"""

from abc import ABC, abstractmethod
from collections.abc import MutableMapping


class FieldStore(ABC):
    """Accessor contract for an entity wrapped by EncryptedProxy."""

    @abstractmethod
    def get_field(self, name: str) -> object:
        """Return the stored value of a field."""

    @abstractmethod
    def set_field(self, name: str, value: object) -> None:
        """Store a value in a field."""

    @abstractmethod
    def has_field(self, name: str) -> bool:
        """Check whether a field is set."""

    @abstractmethod
    def remove_field(self, name: str) -> None:
        """Remove a field."""

    def invoke(self, name: str, *args: object, **kwargs: object) -> object:
        """
        Call a method of the wrapped entity by name.

        Raises:
            AttributeError: If the entity has no such member
            TypeError: If the member is not callable
        """
        method = getattr(self.target, name)
        if not callable(method):
            raise TypeError(f"'{type(self.target).__name__}.{name}' is not callable")
        return method(*args, **kwargs)

    @property
    @abstractmethod
    def target(self) -> object:
        """The wrapped entity itself."""


class ObjectStore(FieldStore):
    """FieldStore over an object's attributes."""

    def __init__(self, obj: object) -> None:
        self._obj = obj

    @property
    def target(self) -> object:
        return self._obj

    def get_field(self, name: str) -> object:
        return getattr(self._obj, name)

    def set_field(self, name: str, value: object) -> None:
        setattr(self._obj, name, value)

    def has_field(self, name: str) -> bool:
        # PHP-style isset: a field holding None counts as unset
        return getattr(self._obj, name, None) is not None

    def remove_field(self, name: str) -> None:
        delattr(self._obj, name)


class MappingStore(FieldStore):
    """FieldStore over a mutable mapping such as a dict or a document."""

    def __init__(self, mapping: MutableMapping) -> None:
        self._mapping = mapping

    @property
    def target(self) -> object:
        return self._mapping

    def get_field(self, name: str) -> object:
        return self._mapping[name]

    def set_field(self, name: str, value: object) -> None:
        self._mapping[name] = value

    def has_field(self, name: str) -> bool:
        return self._mapping.get(name) is not None

    def remove_field(self, name: str) -> None:
        del self._mapping[name]


def as_field_store(inner: object) -> FieldStore:
    """
    Wrap an entity in the matching FieldStore.

    FieldStore instances are returned unchanged, mutable mappings get a
    MappingStore and any other object gets an ObjectStore.
    """
    if isinstance(inner, FieldStore):
        return inner
    if isinstance(inner, MutableMapping):
        return MappingStore(inner)
    return ObjectStore(inner)
