"""
contact_store.utils - Utility module

Path resolution and logging configuration.
"""

from contact_store.utils.paths import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_DATA_FILE,
    resolve_config_dir,
    resolve_data_file,
)

__all__ = [
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_DATA_FILE",
    "resolve_config_dir",
    "resolve_data_file",
]
