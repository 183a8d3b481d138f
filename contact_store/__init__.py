"""
contact_store - A single-user contact manager backed by a JSON file.

Contacts are kept in one JSON document on local disk. Reads take a shared
lock, writes go through an exclusive lock and an atomic temp-file rename so
that concurrent invocations never observe or produce a half-written file.
"""

__version__ = "0.1.0"
__author__ = "contact-store contributors"
