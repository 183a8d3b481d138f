"""
Contact book: the operations offered to callers such as the CLI.

A ContactBook is loaded from a backing file, mutated in memory and saved
back explicitly. It lives for a single command invocation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from contact_store.storage.json_store import DEFAULT_INDENT, JsonContactStore
from contact_store.store.collection import ContactCollection
from contact_store.store.contact import Contact

logger = logging.getLogger(__name__)


class ContactBook:
    """
    Contacts loaded from one backing file.

    Mutations only change the in-memory collection. Call save() afterwards
    to persist them; nothing is written automatically. There is no check
    that the file is unchanged between open() and save(), so the last
    writer wins.

    Usage:
        book = ContactBook.open(Path("contacts.json"))
        contact = book.add("Alice", "alice@example.com", phone="123")
        book.save()

        for match in book.find("alice"):
            print(match.name)
    """

    def __init__(self, store: JsonContactStore, collection: ContactCollection):
        self.store = store
        self.collection = collection
        self._dirty = False

    @classmethod
    def open(
        cls, path: Path | str, indent: Optional[int] = DEFAULT_INDENT
    ) -> "ContactBook":
        """
        Load the book stored at path.

        Raises:
            StoreError: If the backing file cannot be read or is corrupt
        """
        store = JsonContactStore(path, indent=indent)
        return cls(store, store.load())

    @property
    def path(self) -> Path:
        return self.store.path

    @property
    def dirty(self) -> bool:
        """Whether the book has unsaved changes."""
        return self._dirty

    def add(self, name: str, email: str, phone: Optional[str] = None) -> Contact:
        """
        Validate input and append a new contact.

        Raises:
            ValidationError: If a field is empty or too long
        """
        contact = Contact.create(name, email, phone)
        self.collection.add(contact)
        self._dirty = True
        logger.debug(f"Added contact {contact.id}")
        return contact

    def remove(self, contact_id: str) -> bool:
        """Remove the contact with the given id; return whether one existed."""
        removed = self.collection.remove(contact_id)
        if removed:
            self._dirty = True
            logger.debug(f"Removed contact {contact_id}")
        return removed

    def get(self, contact_id: str) -> Optional[Contact]:
        return self.collection.get(contact_id)

    def list(self) -> tuple[Contact, ...]:
        """Return all contacts in insertion order."""
        return self.collection.list()

    def find(self, query: str) -> list[Contact]:
        """Return contacts whose name or email contains query, ignoring case."""
        return self.collection.find(query)

    def save(self) -> None:
        """
        Persist the whole book to its backing file.

        Raises:
            StoreError: If any step of the atomic save fails
        """
        self.store.save(self.collection)
        self._dirty = False
