"""
Tests for the inner entity adapters.
"""

from collections import UserDict

import pytest

from encryption_wrapper.entities import FieldStore, MappingStore, ObjectStore, as_field_store


class Account:
    def __init__(self) -> None:
        self.owner = "alice"
        self.balance = None

    def greet(self, greeting: str, punctuation: str = "!") -> str:
        return f"{greeting}, {self.owner}{punctuation}"


class TestObjectStore:
    """Tests for ObjectStore."""

    def setup_method(self) -> None:
        self.account = Account()
        self.store = ObjectStore(self.account)

    def test_get_and_set(self) -> None:
        self.store.set_field("owner", "bob")

        assert self.account.owner == "bob"
        assert self.store.get_field("owner") == "bob"

    def test_get_missing(self) -> None:
        with pytest.raises(AttributeError):
            self.store.get_field("missing")

    def test_has_field_treats_none_as_unset(self) -> None:
        assert self.store.has_field("owner")
        assert not self.store.has_field("balance")
        assert not self.store.has_field("missing")

    def test_remove_field(self) -> None:
        self.store.remove_field("owner")

        assert not hasattr(self.account, "owner")

    def test_invoke(self) -> None:
        assert self.store.invoke("greet", "Hello") == "Hello, alice!"
        assert self.store.invoke("greet", "Hi", punctuation=".") == "Hi, alice."

    def test_target(self) -> None:
        assert self.store.target is self.account


class TestMappingStore:
    """Tests for MappingStore."""

    def setup_method(self) -> None:
        self.document: dict[str, object] = {"title": "report", "draft": None}
        self.store = MappingStore(self.document)

    def test_get_and_set(self) -> None:
        self.store.set_field("body", "text")

        assert self.document["body"] == "text"
        assert self.store.get_field("title") == "report"

    def test_get_missing(self) -> None:
        with pytest.raises(KeyError):
            self.store.get_field("missing")

    def test_has_field(self) -> None:
        assert self.store.has_field("title")
        assert not self.store.has_field("draft")
        assert not self.store.has_field("missing")

    def test_remove_field(self) -> None:
        self.store.remove_field("title")

        assert "title" not in self.document
        with pytest.raises(KeyError):
            self.store.remove_field("title")

    def test_invoke_mapping_method(self) -> None:
        assert sorted(self.store.invoke("keys")) == ["draft", "title"]


class TestAsFieldStore:
    """Tests for as_field_store()."""

    def test_object(self) -> None:
        assert isinstance(as_field_store(Account()), ObjectStore)

    @pytest.mark.parametrize("mapping", [{}, UserDict()])
    def test_mapping(self, mapping: object) -> None:
        assert isinstance(as_field_store(mapping), MappingStore)

    def test_existing_store(self) -> None:
        store = MappingStore({})

        assert as_field_store(store) is store

    def test_custom_store(self) -> None:
        """Test that user-defined stores satisfy the contract."""

        class UpperStore(FieldStore):
            def __init__(self) -> None:
                self.data: dict[str, object] = {}

            @property
            def target(self) -> object:
                return self.data

            def get_field(self, name: str) -> object:
                return self.data[name.upper()]

            def set_field(self, name: str, value: object) -> None:
                self.data[name.upper()] = value

            def has_field(self, name: str) -> bool:
                return name.upper() in self.data

            def remove_field(self, name: str) -> None:
                del self.data[name.upper()]

        store = UpperStore()
        store.set_field("name", "x")

        assert as_field_store(store) is store
        assert store.data == {"NAME": "x"}
        assert store.invoke("get", "NAME") == "x"
