"""
Command-line interface for contact_store.

Provides CLI commands for adding, removing, listing and searching contacts
kept in a local JSON file.

Usage:
    # Show help
    contact-store --help

    # Add a contact
    contact-store add "Alice" alice@example.com --phone 123

    # List and search
    contact-store list
    contact-store find alice

    # Remove by id
    contact-store remove 2f1c...

    # Use another data file
    contact-store --file ~/work-contacts.json list
"""

import sys
from pathlib import Path
from typing import NoReturn

import click

from contact_store import __version__
from contact_store.book import ContactBook
from contact_store.cli.formatters import show_contacts, show_matches
from contact_store.config.generator import save_config_file
from contact_store.config.loader import DEFAULT_CONFIG_FILE, ConfigError, ConfigLoader
from contact_store.storage.json_store import DEFAULT_INDENT
from contact_store.store.errors import StoreError, ValidationError
from contact_store.utils import resolve_config_dir, resolve_data_file
from contact_store.utils.logging import cleanup_old_logs, get_logger, setup_logging
from contact_store.utils.paths import DATA_FILE_ENV_VAR


def get_config_dir(config_dir: str | None) -> Path:
    """Get the configuration directory path."""
    return resolve_config_dir(config_dir)


def get_config_file(config_file: str | None, config_dir: Path) -> Path:
    """Get the configuration file path."""
    if config_file:
        return Path(config_file).expanduser()
    return config_dir / DEFAULT_CONFIG_FILE


def fail(message: str) -> NoReturn:
    """Print an error in red on stderr and exit with status 1."""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


def open_book(ctx: click.Context) -> ContactBook:
    """Load the contact book configured for this invocation, or exit."""
    logger = get_logger(__name__)
    data_file = ctx.obj["data_file"]
    try:
        return ContactBook.open(data_file, indent=ctx.obj["json_indent"])
    except StoreError as e:
        logger.error(f"Could not load contacts: {e}")
        fail(str(e))


def save_book(book: ContactBook) -> None:
    """Persist the contact book, or exit."""
    logger = get_logger(__name__)
    try:
        book.save()
    except StoreError as e:
        logger.error(f"Could not save contacts: {e}")
        fail(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="contact-store")
@click.option(
    "--verbose", "-v", is_flag=True, help="Enable verbose output with detailed logging."
)
@click.option(
    "--config-dir",
    "-c",
    type=click.Path(exists=False, file_okay=False, dir_okay=True),
    envvar="CONTACT_STORE_CONFIG_DIR",
    help="Configuration directory path (default: ~/.contact-store).",
)
@click.option(
    "--config-file",
    type=click.Path(exists=False, file_okay=True, dir_okay=False),
    envvar="CONTACT_STORE_CONFIG_FILE",
    help="Configuration file path (default: <config-dir>/config.yaml).",
)
@click.option(
    "--file",
    "-f",
    "data_file",
    type=click.Path(exists=False, file_okay=True, dir_okay=False),
    envvar=DATA_FILE_ENV_VAR,
    help="Path to the contacts JSON file (default: contacts.json).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    config_dir: str | None,
    config_file: str | None,
    data_file: str | None,
) -> None:
    """
    Simple, secure contacts manager.

    Contacts are stored in a single JSON file. Reads and writes are locked
    against concurrent invocations, and every save atomically replaces the
    file with owner-only permissions.
    """
    ctx.ensure_object(dict)

    resolved_config_dir = get_config_dir(config_dir)
    resolved_config_file = get_config_file(config_file, resolved_config_dir)

    ctx.obj["config_dir"] = resolved_config_dir
    ctx.obj["config_file"] = resolved_config_file

    config = {}
    try:
        loader = ConfigLoader(config_dir=resolved_config_dir)
        config = loader.load_from_file(resolved_config_file)
        if config:
            loader.validate(config)
    except ConfigError as e:
        # Show error but don't fail - allow CLI to work without config file
        click.echo(
            click.style(f"Warning: Configuration error: {e}", fg="yellow"), err=True
        )
        config = {}

    ctx.obj["config"] = config

    # CLI flag takes precedence over config file
    effective_verbose = verbose or config.get("verbose", False)
    ctx.obj["verbose"] = effective_verbose

    log_dir = None
    if config.get("log_dir"):
        log_dir = Path(config["log_dir"]).expanduser()

    setup_logging(verbose=effective_verbose, log_dir=log_dir)

    if log_dir is not None:
        cleanup_old_logs(log_dir, keep_count=config.get("log_retention_count", 10))

    ctx.obj["data_file"] = resolve_data_file(data_file, config.get("data_file"))
    ctx.obj["json_indent"] = config.get("json_indent", DEFAULT_INDENT)

    get_logger(__name__).debug(f"Using data file {ctx.obj['data_file']}")


# =============================================================================
# Add Command
# =============================================================================


@cli.command("add")
@click.argument("name")
@click.argument("email")
@click.option("--phone", "-p", default=None, help="Phone number.")
@click.pass_context
def add_command(ctx: click.Context, name: str, email: str, phone: str | None) -> None:
    """
    Add a contact.

    Examples:

        contact-store add "Alice Smith" alice@example.com

        contact-store add "Bob Brown" bob@example.com --phone "+1 555 0100"
    """
    logger = get_logger(__name__)
    book = open_book(ctx)

    try:
        contact = book.add(name, email, phone)
    except ValidationError as e:
        fail(e.detail)

    click.echo(f"Adding contact: {contact.name} <{contact.email}>")
    save_book(book)
    click.echo(click.style("Saved.", fg="green"))
    click.echo(f"ID: {contact.id}")
    logger.info(f"Added contact {contact.id} to {book.path}")


# =============================================================================
# Remove Command
# =============================================================================


@cli.command("remove")
@click.argument("contact_id", metavar="ID")
@click.pass_context
def remove_command(ctx: click.Context, contact_id: str) -> None:
    """
    Remove a contact by id.

    The file is only rewritten when a contact was actually removed.

    Example:

        contact-store remove 2f1c9a4e-...
    """
    logger = get_logger(__name__)
    book = open_book(ctx)

    if not book.remove(contact_id):
        click.echo(f"No contact with id {contact_id}")
        return

    save_book(book)
    click.echo(click.style(f"Removed contact {contact_id}", fg="green"))
    logger.info(f"Removed contact {contact_id} from {book.path}")


# =============================================================================
# List Command
# =============================================================================


@cli.command("list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """
    List all contacts.

    Prints one "id | name | email | phone" line per contact.
    """
    book = open_book(ctx)
    show_contacts(book.list())


# =============================================================================
# Find Command
# =============================================================================


@cli.command("find")
@click.argument("query")
@click.pass_context
def find_command(ctx: click.Context, query: str) -> None:
    """
    Find contacts by substring of name or email.

    Matching ignores case. Phone numbers are not searched.

    Example:

        contact-store find alice
    """
    book = open_book(ctx)
    show_matches(book.find(query))


# =============================================================================
# Init-Config Command
# =============================================================================


@cli.command("init-config")
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite existing configuration file if it exists.",
)
@click.pass_context
def init_config_command(ctx: click.Context, force: bool) -> None:
    """
    Generate a default configuration file.

    Creates a configuration file with all available options documented
    and commented out.

    Examples:

        # Create config file (fails if already exists)
        contact-store init-config

        # Overwrite existing config file
        contact-store init-config --force
    """
    logger = get_logger(__name__)
    config_file = ctx.obj["config_file"]

    click.echo(f"Creating configuration file: {config_file}")

    success, error = save_config_file(config_file, overwrite=force)

    if success:
        click.echo(click.style("Configuration file created successfully!", fg="green"))
        click.echo(f"\nLocation: {config_file}")
        logger.info(f"Created configuration file: {config_file}")
    else:
        logger.error(f"Failed to create configuration file: {error}")
        fail(str(error))
