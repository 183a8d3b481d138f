"""
Contact data model for the contact store.

Provides the Contact record with:
- Validated construction of new contacts (trimming and length limits)
- Conversion to and from the JSON representation used on disk
"""

import uuid
from dataclasses import dataclass
from typing import Any, Optional

from contact_store.store.errors import ValidationError

# Field length limits, counted in characters after trimming
MAX_NAME_LENGTH = 200
MAX_EMAIL_LENGTH = 320
MAX_PHONE_LENGTH = 50


def generate_contact_id() -> str:
    """Return a new random contact identifier (UUID4 as text)."""
    return str(uuid.uuid4())


def is_encodable(value: str) -> bool:
    """Check that value can be written to the UTF-8 backing file.

    Lone surrogates (for example from undecodable command-line bytes) cannot.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass(frozen=True)
class Contact:
    """
    A single contact record.

    Attributes:
        id: Opaque unique identifier, assigned at creation and never changed
        name: Display name, non-empty and at most 200 characters
        email: Email address, non-empty and at most 320 characters
        phone: Optional phone number, at most 50 characters

    Usage:
        # Validate input and create a new record
        contact = Contact.create("Alice", "alice@example.com", phone="123")

        # Round-trip through the on-disk representation
        data = contact.to_dict()
        same = Contact.from_dict(data)
    """

    id: str
    name: str
    email: str
    phone: Optional[str] = None

    @classmethod
    def create(
        cls, name: str, email: str, phone: Optional[str] = None
    ) -> "Contact":
        """
        Validate user input and build a new contact with a fresh id.

        All fields are trimmed before they are checked, so a value made only
        of whitespace counts as empty. A phone that is empty after trimming
        is stored as None.

        Args:
            name: Contact name
            email: Contact email address
            phone: Optional phone number

        Returns:
            New Contact instance

        Raises:
            ValidationError: If a field is empty, exceeds its length limit or
                is not valid Unicode text
        """
        name = name.strip()
        email = email.strip()
        if phone is not None:
            phone = phone.strip() or None

        for field, value in (("name", name), ("email", email), ("phone", phone)):
            if value is not None and not is_encodable(value):
                raise ValidationError(
                    f"{field} contains characters that are not valid Unicode",
                    field=field,
                )

        if not name:
            raise ValidationError("name must be non-empty", field="name")
        if not email:
            raise ValidationError("email must be non-empty", field="email")
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"name too long (max {MAX_NAME_LENGTH} chars)", field="name"
            )
        if len(email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"email too long (max {MAX_EMAIL_LENGTH} chars)", field="email"
            )
        if phone is not None and len(phone) > MAX_PHONE_LENGTH:
            raise ValidationError(
                f"phone too long (max {MAX_PHONE_LENGTH} chars)", field="phone"
            )

        return cls(id=generate_contact_id(), name=name, email=email, phone=phone)

    @classmethod
    def from_dict(cls, data: Any) -> "Contact":
        """
        Rebuild a contact from its on-disk representation.

        Stored records are taken as they are; length limits only apply to
        new input. A missing ``phone`` key loads as None.

        Args:
            data: Mapping with id, name, email and optional phone

        Returns:
            Contact instance

        Raises:
            ValueError: If the mapping is not a well-formed contact record
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")

        values: dict[str, Any] = {}
        for key in ("id", "name", "email"):
            if key not in data:
                raise ValueError(f"missing field '{key}'")
            if not isinstance(data[key], str):
                raise ValueError(
                    f"field '{key}' must be a string, got {type(data[key]).__name__}"
                )
            values[key] = data[key]

        phone = data.get("phone")
        if phone is not None and not isinstance(phone, str):
            raise ValueError(
                f"field 'phone' must be a string or null, got {type(phone).__name__}"
            )
        values["phone"] = phone

        for key, value in values.items():
            if value is not None and not is_encodable(value):
                raise ValueError(f"field '{key}' contains an unpaired surrogate")

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON object stored in the backing file."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }

    def matches(self, query: str) -> bool:
        """
        Check whether query occurs in the name or email, ignoring case.

        The phone number is not searched. An empty query matches.
        """
        needle = query.casefold()
        return needle in self.name.casefold() or needle in self.email.casefold()
