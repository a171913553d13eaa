"""Mini README: Interactive text menu driving the balance store.

Structure:
    * MenuChoice - enum of the four numbered menu entries.
    * MenuSession - prompt loop translating store outcomes into messages.

The session is presentation only: it forwards raw user input to the store,
prints formatted balances, and turns ``InvalidAmount`` and
``InsufficientFunds`` into friendly messages before re-prompting. Storage
failures are left to propagate to the caller. Input and output callables are
injectable so tests can script a whole session.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

import typer

from ..ledger import BalanceStore, InsufficientFunds, InvalidAmount
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

SEPARATOR = "--------------------------------"


class MenuChoice(str, Enum):
    """Numbered entries offered by the menu."""

    VIEW = "1"
    CREDIT = "2"
    DEBIT = "3"
    EXIT = "4"


class MenuSession:
    """Run the view/credit/debit/exit loop against a store."""

    def __init__(
        self,
        store: BalanceStore,
        *,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = typer.echo,
    ) -> None:
        self._store = store
        self._prompt = prompt
        self._echo = echo

    def run(self) -> None:
        """Loop until the user exits or input is interrupted."""

        try:
            while True:
                self._show_menu()
                choice = self._prompt("Enter your choice (1-4): ").strip()
                if choice == MenuChoice.EXIT.value:
                    break
                self._dispatch(choice)
        except (KeyboardInterrupt, EOFError):
            LOGGER.debug("Menu interrupted")
            self._echo("\nInterrupted. Exiting.")
            return
        self._echo("Exiting the program. Goodbye!")

    def _show_menu(self) -> None:
        self._echo(SEPARATOR)
        self._echo("Account Management System")
        self._echo("1. View Balance")
        self._echo("2. Credit Account")
        self._echo("3. Debit Account")
        self._echo("4. Exit")
        self._echo(SEPARATOR)

    def _dispatch(self, choice: str) -> None:
        if choice == MenuChoice.VIEW.value:
            self.view_balance()
        elif choice == MenuChoice.CREDIT.value:
            self.credit_account()
        elif choice == MenuChoice.DEBIT.value:
            self.debit_account()
        else:
            self._echo("Invalid choice, please select 1-4.")

    def view_balance(self) -> None:
        balance = self._store.read_balance()
        self._echo(f"Current balance: {self._store.format_balance(balance)}")

    def credit_account(self) -> None:
        raw_amount = self._prompt("Enter credit amount: ")
        try:
            balance = self._store.credit(raw_amount)
        except InvalidAmount:
            self._echo("Invalid amount. Please enter a positive number.")
            return
        self._echo(f"Amount credited. New balance: {self._store.format_balance(balance)}")

    def debit_account(self) -> None:
        raw_amount = self._prompt("Enter debit amount: ")
        try:
            balance = self._store.debit(raw_amount)
        except InvalidAmount:
            self._echo("Invalid amount. Please enter a positive number.")
            return
        except InsufficientFunds:
            self._echo("Insufficient funds for this debit.")
            return
        self._echo(f"Amount debited. New balance: {self._store.format_balance(balance)}")
