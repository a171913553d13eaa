"""Mini README: Tests for the interactive menu session.

Each test scripts the user's answers, runs a full session against a store in
a temporary directory, and inspects the printed lines.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

import pytest

from accountledger.interface import MenuSession
from accountledger.ledger import BalanceStore, StorageReadError


class ScriptedConsole:
    """Feed canned answers to the menu and capture its output."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.prompts: List[str] = []
        self.lines: List[str] = []

    def prompt(self, message: str) -> str:
        self.prompts.append(message)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    def echo(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture()
def store(tmp_path) -> BalanceStore:
    return BalanceStore(tmp_path / "balance.json")


def run_session(store: BalanceStore, answers: Iterable[str]) -> ScriptedConsole:
    console = ScriptedConsole(answers)
    MenuSession(store, prompt=console.prompt, echo=console.echo).run()
    return console


def test_view_balance_then_exit(store: BalanceStore) -> None:
    console = run_session(store, ["1", "4"])

    assert "Account Management System" in console.lines
    assert "Current balance: 001000.00" in console.lines
    assert console.lines[-1] == "Exiting the program. Goodbye!"


def test_credit_and_debit_flow(store: BalanceStore) -> None:
    console = run_session(store, ["2", "50", "3", "200", "4"])

    assert "Amount credited. New balance: 001050.00" in console.lines
    assert "Amount debited. New balance: 000850.00" in console.lines
    assert console.prompts.count("Enter your choice (1-4): ") == 3
    assert store.read_balance() == Decimal("850.00")


def test_invalid_amount_returns_to_menu(store: BalanceStore) -> None:
    console = run_session(store, ["2", "abc", "3", "-10", "4"])

    assert console.lines.count("Invalid amount. Please enter a positive number.") == 2
    assert store.read_balance() == 1000


def test_insufficient_funds_message(store: BalanceStore) -> None:
    console = run_session(store, ["3", "1500", "4"])

    assert "Insufficient funds for this debit." in console.lines
    assert store.read_balance() == 1000


def test_invalid_choice_reprompts(store: BalanceStore) -> None:
    console = run_session(store, ["9", " 4 "])

    assert "Invalid choice, please select 1-4." in console.lines
    assert console.lines[-1] == "Exiting the program. Goodbye!"


def test_end_of_input_exits_cleanly(store: BalanceStore) -> None:
    console = run_session(store, ["2"])

    assert console.prompts[-1] == "Enter credit amount: "
    assert console.lines[-1] == "\nInterrupted. Exiting."
    assert store.read_balance() == 1000


def test_keyboard_interrupt_exits_cleanly(store: BalanceStore) -> None:
    def interrupt(_: str) -> str:
        raise KeyboardInterrupt

    lines: List[str] = []
    MenuSession(store, prompt=interrupt, echo=lines.append).run()

    assert lines[-1] == "\nInterrupted. Exiting."


def test_storage_errors_propagate(store: BalanceStore) -> None:
    store.path.write_text("garbage", encoding="utf-8")

    with pytest.raises(StorageReadError):
        run_session(store, ["1", "4"])
