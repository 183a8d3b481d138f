"""
Unit tests for ContactCollection.

Tests insertion order, removal, search and list conversion.
"""

import pytest

from contact_store.store.collection import ContactCollection
from contact_store.store.contact import Contact


@pytest.fixture
def alice():
    return Contact(id="a1", name="Alice Smith", email="alice@x.com", phone="123")


@pytest.fixture
def bob():
    return Contact(id="b1", name="Bob Brown", email="bob@x.com")


@pytest.fixture
def collection(alice, bob):
    c = ContactCollection()
    c.add(alice)
    c.add(bob)
    return c


class TestAddAndList:
    """Tests for add() and list()."""

    def test_new_collection_is_empty(self):
        collection = ContactCollection()
        assert len(collection) == 0
        assert collection.list() == ()

    def test_add_appends_in_order(self, collection, alice, bob):
        """Test that contacts are listed in insertion order."""
        assert collection.list() == (alice, bob)

    def test_list_is_read_only_snapshot(self, collection):
        """Test that list() returns an immutable tuple."""
        listed = collection.list()
        assert isinstance(listed, tuple)
        collection.add(Contact(id="c1", name="Carol", email="c@x.com"))
        assert len(listed) == 2
        assert len(collection) == 3

    def test_add_does_not_deduplicate(self, alice):
        """Test that the same record may be added twice."""
        collection = ContactCollection()
        collection.add(alice)
        collection.add(alice)
        assert len(collection) == 2

    def test_iteration_follows_order(self, collection, alice, bob):
        assert list(collection) == [alice, bob]


class TestRemove:
    """Tests for remove()."""

    def test_remove_existing(self, collection, bob):
        assert collection.remove("a1") is True
        assert collection.list() == (bob,)

    def test_remove_missing_returns_false(self, collection):
        assert collection.remove("nope") is False
        assert len(collection) == 2

    def test_remove_removes_all_matches(self, alice, bob):
        """Test that every record carrying the id is removed."""
        collection = ContactCollection([alice, bob, alice])
        assert collection.remove("a1") is True
        assert collection.list() == (bob,)

    def test_remove_from_empty(self):
        assert ContactCollection().remove("a1") is False


class TestFind:
    """Tests for find() and get()."""

    def test_find_is_case_insensitive(self, collection, alice):
        assert collection.find("alice") == [alice]
        assert collection.find("SMITH") == [alice]

    def test_find_matches_email(self, collection, alice, bob):
        assert collection.find("@x.com") == [alice, bob]

    def test_find_ignores_phone(self, collection):
        assert collection.find("123") == []

    def test_find_empty_query_returns_all(self, collection, alice, bob):
        assert collection.find("") == [alice, bob]

    def test_find_no_match(self, collection):
        assert collection.find("zed") == []

    def test_find_duplicates_both_returned(self):
        """Test that contacts with identical name and email are both found."""
        collection = ContactCollection()
        first = Contact.create("Alice", "a@x.com")
        second = Contact.create("Alice", "a@x.com")
        collection.add(first)
        collection.add(second)
        assert collection.find("alice") == [first, second]

    def test_get(self, collection, bob):
        assert collection.get("b1") == bob
        assert collection.get("zz") is None


class TestListConversion:
    """Tests for to_list() and from_list()."""

    def test_to_list(self, collection):
        assert collection.to_list() == [
            {"id": "a1", "name": "Alice Smith", "email": "alice@x.com", "phone": "123"},
            {"id": "b1", "name": "Bob Brown", "email": "bob@x.com", "phone": None},
        ]

    def test_from_list_preserves_order(self, collection):
        restored = ContactCollection.from_list(collection.to_list())
        assert restored.list() == collection.list()

    def test_from_list_rejects_non_list(self):
        with pytest.raises(ValueError, match="expected a JSON array"):
            ContactCollection.from_list({"id": "a1"})

    def test_from_list_reports_bad_record_index(self):
        items = [
            {"id": "a1", "name": "A", "email": "a@x.com"},
            {"id": "b1", "name": "B"},
        ]
        with pytest.raises(ValueError, match="record 1"):
            ContactCollection.from_list(items)
