"""
Path utilities for configuration and data file resolution.

Provides consistent path resolution for the contact-store configuration
directory and the backing contacts file across all modules.
"""

from __future__ import annotations

import os
from pathlib import Path

# Default configuration directory
DEFAULT_CONFIG_DIR = Path.home() / ".contact-store"

# Environment variable for overriding config directory
CONFIG_DIR_ENV_VAR = "CONTACT_STORE_CONFIG_DIR"

# Default data file, relative to the working directory
DEFAULT_DATA_FILE = Path("contacts.json")

# Environment variable for overriding the data file
DATA_FILE_ENV_VAR = "CONTACT_STORE_FILE"


def resolve_config_dir(config_dir: Path | str | None = None) -> Path:
    """
    Resolve the configuration directory path.

    Priority:
        1. Explicit config_dir parameter (if provided)
        2. CONTACT_STORE_CONFIG_DIR environment variable
        3. Default directory (~/.contact-store)

    Args:
        config_dir: Optional explicit configuration directory path.
                   Can be a Path object or string.

    Returns:
        Resolved Path to the configuration directory (expanduser and resolve applied)
    """
    if config_dir is not None:
        return Path(config_dir).expanduser().resolve()

    env_dir = os.environ.get(CONFIG_DIR_ENV_VAR)
    if env_dir:
        return Path(env_dir).expanduser().resolve()

    return DEFAULT_CONFIG_DIR.expanduser().resolve()


def resolve_data_file(
    data_file: Path | str | None = None, configured: str | None = None
) -> Path:
    """
    Resolve the backing contacts file path.

    Priority:
        1. Explicit data_file parameter (CLI option or its env var)
        2. data_file value from the configuration file
        3. contacts.json in the current working directory

    The file itself does not have to exist.

    Args:
        data_file: Optional explicit data file path
        configured: Optional path taken from the configuration file

    Returns:
        Absolute Path to the data file (expanduser and resolve applied)
    """
    if data_file is not None:
        return Path(data_file).expanduser().resolve()

    if configured:
        return Path(configured).expanduser().resolve()

    return DEFAULT_DATA_FILE.resolve()
