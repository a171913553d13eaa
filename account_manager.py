"""Mini README: Entry point CLI for the interactive account ledger.

This script exposes a Typer CLI that loads settings from the environment
(``ACCOUNTING_DATA_FILE`` and friends), configures logging, and runs the
numbered menu against the configured balance file until the user exits.
"""

from __future__ import annotations

import typer

from accountledger.configuration import get_settings
from accountledger.interface import MenuSession
from accountledger.ledger import BalanceStore, StorageReadError
from accountledger.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Manage the balance of a single account from the terminal.")


@cli.command()
def run() -> None:
    """Start the interactive balance menu."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    store = BalanceStore.from_settings(settings)
    try:
        MenuSession(store).run()
    except StorageReadError as error:
        LOGGER.error("Balance record unavailable: %s", error)
        typer.echo(f"Unable to read balance data: {error}", err=True)
        raise typer.Exit(code=1) from error


if __name__ == "__main__":
    cli()
