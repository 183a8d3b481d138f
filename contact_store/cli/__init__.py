"""CLI package for contact_store."""

from contact_store.cli.formatters import (
    format_contact_line,
    format_match_line,
    show_contacts,
    show_matches,
)
from contact_store.cli.main import cli, get_config_dir, get_config_file

__all__ = [
    "cli",
    "format_contact_line",
    "format_match_line",
    "get_config_dir",
    "get_config_file",
    "show_contacts",
    "show_matches",
]
