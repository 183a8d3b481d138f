"""
Entry point for running contact_store as a module.

Usage:
    python -m contact_store --help
    python -m contact_store add "Alice" alice@example.com --phone 123
    python -m contact_store find alice
"""

from contact_store.cli import cli

if __name__ == "__main__":
    cli()
