"""Mini README: Tests for environment-driven ledger settings."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from accountledger.configuration import DEFAULT_DATA_FILE, LedgerSettings
from accountledger.ledger import BalanceStore


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch, tmp_path):
    for name in ("ACCOUNTING_DATA_FILE", "ACCOUNTING_INITIAL_BALANCE", "ACCOUNTING_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults_place_data_beside_the_package() -> None:
    settings = LedgerSettings()

    assert settings.data_file == DEFAULT_DATA_FILE.resolve()
    assert settings.initial_balance == Decimal("1000.00")
    assert settings.log_level == "WARNING"


def test_environment_overrides_data_file(monkeypatch, tmp_path) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv("ACCOUNTING_DATA_FILE", str(target))
    monkeypatch.setenv("ACCOUNTING_INITIAL_BALANCE", "42.5")
    monkeypatch.setenv("ACCOUNTING_LOG_LEVEL", "debug")

    settings = LedgerSettings()
    store = BalanceStore.from_settings(settings)

    assert settings.data_file == target.resolve()
    assert settings.log_level == "DEBUG"
    assert store.read_balance() == Decimal("42.50")
    assert target.exists()


def test_negative_initial_balance_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("ACCOUNTING_INITIAL_BALANCE", "-1")

    with pytest.raises(ValidationError):
        LedgerSettings()


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LedgerSettings(log_level="chatty")
