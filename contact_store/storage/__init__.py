"""
contact_store.storage - Durable JSON persistence

File locking, atomic whole-file replacement, and the load/save protocol
for the backing JSON file.
"""

from contact_store.storage.atomic import atomic_write_bytes
from contact_store.storage.json_store import JsonContactStore, open_store, save_store
from contact_store.storage.locking import locked_file

__all__ = [
    "JsonContactStore",
    "atomic_write_bytes",
    "locked_file",
    "open_store",
    "save_store",
]
