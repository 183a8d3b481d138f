"""CLI output formatting functions.

This module contains functions for rendering contacts to the command line.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from contact_store.store.contact import Contact


def format_contact_line(contact: "Contact") -> str:
    """
    Format a contact as a single "id | name | email[ | phone]" line.

    Args:
        contact: The contact to format

    Returns:
        Formatted line without trailing newline
    """
    line = f"{contact.id} | {contact.name} | {contact.email}"
    if contact.phone is not None:
        line += f" | {contact.phone}"
    return line


def format_match_line(contact: "Contact") -> str:
    """Format a search result as "name - phone"."""
    return f"{contact.name} - {contact.phone or 'No phone'}"


def show_contacts(contacts: Iterable["Contact"]) -> None:
    """Print every contact followed by the total count."""
    count = 0
    for contact in contacts:
        click.echo(format_contact_line(contact))
        count += 1
    click.echo(f"Total: {count}")


def show_matches(contacts: Iterable["Contact"]) -> None:
    """Print search results followed by the number found."""
    count = 0
    for contact in contacts:
        click.echo(format_match_line(contact))
        count += 1
    click.echo(f"Found: {count}")
