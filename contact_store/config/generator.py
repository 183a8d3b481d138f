"""
Configuration file generator for contact_store.

Provides functionality to generate a default configuration file with
documentation for all available options.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def generate_default_config() -> str:
    """
    Generate default YAML configuration with all options documented.

    Returns:
        String containing YAML configuration with comments
    """
    return """# contact-store Configuration
# ===========================
#
# Default options for contact-store. CLI arguments always override these
# values.
#
# To use this configuration:
#   1. Save as ~/.contact-store/config.yaml (or custom location)
#   2. Uncomment and modify options as needed

# Storage
# -------

# Path of the JSON file holding the contacts
# Can also be set with --file or CONTACT_STORE_FILE
# Default: contacts.json in the current directory
# data_file: ~/.contact-store/contacts.json

# Indentation of the saved JSON document, or null for compact output
# Default: 2
# json_indent: 2


# Logging
# -------

# Enable verbose output with detailed logging
# Default: false
# verbose: false

# Directory for daily log files (no file logging when unset)
# log_dir: ~/.contact-store/logs

# Number of daily log files to keep in log_dir (0 keeps all)
# Default: 10
# log_retention_count: 10
"""


def save_config_file(
    config_path: Path, overwrite: bool = False
) -> tuple[bool, str | None]:
    """
    Save default configuration file to specified path.

    Creates parent directories if they don't exist and saves
    the configuration with owner-only permissions.

    Args:
        config_path: Path where the config file should be saved
        overwrite: If True, overwrite existing file. If False, fail if file exists.

    Returns:
        Tuple of (success, error_message); error_message is None on success
    """
    try:
        config_path = config_path.expanduser().resolve()

        if config_path.exists() and not overwrite:
            return (
                False,
                f"Configuration file already exists: {config_path}\n"
                "Use --force to overwrite.",
            )

        config_path.parent.mkdir(parents=True, mode=0o700, exist_ok=True)
        config_path.write_text(generate_default_config(), encoding="utf-8")
        config_path.chmod(0o600)

        logger.info(f"Created configuration file: {config_path}")
        return (True, None)

    except OSError as e:
        error_msg = f"Failed to create configuration file: {e}"
        logger.error(error_msg)
        return (False, error_msg)
