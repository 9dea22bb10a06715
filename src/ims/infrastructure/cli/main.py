from __future__ import annotations

from pathlib import Path

import click

from ims.domain.exceptions import StoreUnavailableError
from ims.infrastructure.bootstrap import DEFAULT_DB_PATH, open_store, product_repository
from ims.infrastructure.cli.menu import run_menu
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_low_stock,
    product_search,
    product_show,
    product_update,
    report,
)
from ims.infrastructure.logging_config import setup_logger

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group(invoke_without_command=True)
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_DB_PATH,
    envvar="IMS_DB_PATH",
    show_default=True,
    help="SQLite database file (created if absent).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="IMS_LOG_LEVEL",
    show_default=True,
    help="Minimum level written to stderr.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="IMS_LOG_FILE",
    help="Also write logs to this file (rotated daily).",
)
@click.pass_context
def cli(ctx: click.Context, db_path: Path, log_level: str, log_file: Path | None) -> None:
    """IMS: Inventory Management System

    Without a command, starts the interactive menu.
    """
    setup_logger(log_level, log_file)

    try:
        store = open_store(db_path)
    except StoreUnavailableError as exc:
        click.echo(str(exc), err=True)
        ctx.exit(1)

    ctx.call_on_close(store.close)
    ctx.obj = product_repository(store)

    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


# Register subcommands
cli.add_command(product_add)
cli.add_command(product_delete)
cli.add_command(product_list)
cli.add_command(product_low_stock)
cli.add_command(product_search)
cli.add_command(product_show)
cli.add_command(product_update)
cli.add_command(report)
