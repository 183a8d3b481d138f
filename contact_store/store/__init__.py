"""
contact_store.store - In-memory contact model

Contains the Contact record and its validation, the ordered contact
collection, and the error types shared by the whole package.
"""

from contact_store.store.collection import ContactCollection
from contact_store.store.contact import (
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_LENGTH,
    Contact,
)
from contact_store.store.errors import (
    CorruptStoreError,
    LockError,
    PersistError,
    SerializationError,
    StoreError,
    StoreIOError,
    ValidationError,
)

__all__ = [
    "Contact",
    "ContactCollection",
    "MAX_NAME_LENGTH",
    "MAX_EMAIL_LENGTH",
    "MAX_PHONE_LENGTH",
    "StoreError",
    "ValidationError",
    "CorruptStoreError",
    "LockError",
    "StoreIOError",
    "PersistError",
    "SerializationError",
]
