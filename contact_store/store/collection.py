"""
In-memory collection of contact records.

Keeps contacts in insertion order and supports adding, removing by id and
substring search. Nothing here touches the filesystem.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from contact_store.store.contact import Contact


class ContactCollection:
    """
    Ordered collection of contacts.

    Order is insertion order and is kept as-is through serialization. The
    collection does not validate records and does not enforce unique names
    or emails.

    Usage:
        collection = ContactCollection()
        collection.add(Contact.create("Alice", "alice@example.com"))

        matches = collection.find("alice")
        removed = collection.remove(matches[0].id)
    """

    def __init__(self, contacts: Optional[Iterable[Contact]] = None):
        self._contacts: list[Contact] = [] if contacts is None else [*contacts]

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(tuple(self._contacts))

    def __repr__(self) -> str:
        return f"ContactCollection({len(self._contacts)} contacts)"

    def add(self, contact: Contact) -> None:
        """Append a contact to the end of the collection."""
        self._contacts.append(contact)

    def remove(self, contact_id: str) -> bool:
        """
        Remove every contact whose id equals contact_id.

        Args:
            contact_id: Identifier of the contact to remove

        Returns:
            True if at least one contact was removed
        """
        before = len(self._contacts)
        self._contacts = [c for c in self._contacts if c.id != contact_id]
        return len(self._contacts) != before

    def get(self, contact_id: str) -> Optional[Contact]:
        """Return the first contact with the given id, or None."""
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def find(self, query: str) -> list[Contact]:
        """
        Find contacts whose name or email contains query, ignoring case.

        Args:
            query: Substring to look for; an empty query matches everything

        Returns:
            Matching contacts in collection order
        """
        return [c for c in self._contacts if c.matches(query)]

    def list(self) -> tuple[Contact, ...]:
        """Return all contacts in insertion order as a read-only tuple."""
        return tuple(self._contacts)

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize the collection to a list of JSON-compatible dicts."""
        return [c.to_dict() for c in self._contacts]

    @classmethod
    def from_list(cls, items: Any) -> "ContactCollection":
        """
        Build a collection from the decoded JSON array.

        Raises:
            ValueError: If items is not a list or an element is malformed
        """
        if not isinstance(items, list):
            raise ValueError(f"expected a JSON array, got {type(items).__name__}")

        contacts = []
        for index, item in enumerate(items):
            try:
                contacts.append(Contact.from_dict(item))
            except ValueError as e:
                raise ValueError(f"record {index}: {e}") from e
        return cls(contacts)
