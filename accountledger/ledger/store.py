"""Mini README: File-backed store for the single account balance.

Structure:
    * BalanceRecord - pydantic model describing the persisted JSON record.
    * round2 - rounds a decimal amount to whole cents (ROUND_HALF_UP).
    * format_balance - renders an amount as a zero-padded ``000000.00`` string.
    * BalanceStore - owns the record and exposes read, write, credit and debit.

The store keeps the balance in a small JSON document (``{"balance": 1000.00}``)
and treats it as a whole-record snapshot: every write lands in a temporary
file beside the target and is moved into place with ``os.replace`` so an
interrupted process never leaves half a record behind. Credit and debit run
their read-check-write sequence under an in-process lock. Nothing coordinates
separate processes; a single writer per data file is a precondition.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext
from pathlib import Path
from typing import TYPE_CHECKING, Union

from pydantic import BaseModel, Field, ValidationError

from ..logging_utils import get_logger
from .errors import InsufficientFunds, InvalidAmount, StorageReadError

if TYPE_CHECKING:
    from ..configuration import LedgerSettings

LOGGER = get_logger(__name__)

CENT = Decimal("0.01")
DEFAULT_INITIAL_BALANCE = Decimal("1000.00")
INTEGER_WIDTH = 6

# Wide enough that cent arithmetic on any realistic amount is exact.
MONEY_CONTEXT = Context(prec=1000, rounding=ROUND_HALF_UP)

Amount = Union[int, float, str, Decimal]


class BalanceRecord(BaseModel):
    """Shape of the persisted balance document."""

    balance: Decimal = Field(ge=0, allow_inf_nan=False)

    @classmethod
    def from_json(cls, raw: str) -> "BalanceRecord":
        """Parse a stored document, keeping every digit of the balance."""

        return cls.model_validate(json.loads(raw, parse_float=Decimal))

    def to_json(self) -> str:
        """Render the record with the balance as an exact JSON number."""

        # json.dumps only emits floats, which drop cents on very large balances.
        return f'{{\n  "balance": {self.balance:.2f}\n}}'


def _to_decimal(value: object) -> Decimal:
    """Coerce user input into a finite ``Decimal`` or raise ``InvalidAmount``."""

    if isinstance(value, bool):
        raise InvalidAmount(value)
    try:
        if isinstance(value, Decimal):
            number = value
        elif isinstance(value, (int, float)):
            number = Decimal(str(value))
        elif isinstance(value, str):
            number = Decimal(value.strip())
        else:
            raise InvalidAmount(value)
    except InvalidOperation as error:
        raise InvalidAmount(value) from error
    if not number.is_finite():
        raise InvalidAmount(value)
    return number


def round2(amount: Amount) -> Decimal:
    """Round to the nearest cent, halves away from zero."""

    number = _to_decimal(amount)
    with localcontext(MONEY_CONTEXT):
        try:
            return number.quantize(CENT)
        except InvalidOperation as error:
            raise InvalidAmount(amount) from error


def format_balance(amount: Amount) -> str:
    """Render ``amount`` with two decimals and a zero-padded integer part.

    ``1000`` becomes ``"001000.00"``. Negative values keep the sign ahead of
    the padding (``"-00005.00"``) and integer parts wider than six digits are
    printed in full; both are outside the normal operating range.
    """

    fixed = f"{round2(amount):.2f}"
    integer_part, cents = fixed.split(".")
    return f"{integer_part.zfill(INTEGER_WIDTH)}.{cents}"


def _validate_positive(amount: object) -> Decimal:
    number = _to_decimal(amount)
    if number <= 0:
        raise InvalidAmount(amount)
    return number


class BalanceStore:
    """Persist and mutate the account balance held in a JSON file."""

    def __init__(
        self,
        path: Union[str, Path],
        *,
        initial_balance: Amount = DEFAULT_INITIAL_BALANCE,
    ) -> None:
        self._path = Path(path)
        self._initial_balance = round2(initial_balance)
        if self._initial_balance < 0:
            raise InvalidAmount(initial_balance)
        self._lock = threading.RLock()
        LOGGER.debug("Balance store bound to %s", self._path)

    @classmethod
    def from_settings(cls, settings: "LedgerSettings") -> "BalanceStore":
        """Build a store from loaded configuration."""

        return cls(settings.data_file, initial_balance=settings.initial_balance)

    @property
    def path(self) -> Path:
        return self._path

    format_balance = staticmethod(format_balance)

    def initialize(self) -> None:
        """Create the record with the initial balance unless it already exists."""

        with self._lock:
            if self._path.exists():
                return
            self._persist(self._initial_balance)
            LOGGER.info("Initialised balance record at %s with %s", self._path, self._initial_balance)

    def read_balance(self) -> Decimal:
        """Return the persisted balance, creating the record on first use."""

        with self._lock:
            self.initialize()
            try:
                raw = self._path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as error:
                raise StorageReadError(f"Unable to read balance record at {self._path}") from error
            try:
                record = BalanceRecord.from_json(raw)
            except (json.JSONDecodeError, ValidationError) as error:
                raise StorageReadError(f"Malformed balance record at {self._path}") from error
            return round2(record.balance)

    def write_balance(self, amount: Amount) -> Decimal:
        """Round ``amount`` to cents and replace the stored record with it."""

        normalised = round2(amount)
        if normalised < 0:
            raise InvalidAmount(amount)
        with self._lock:
            self._persist(normalised)
        LOGGER.debug("Balance written: %s", normalised)
        return normalised

    def credit(self, amount: Amount) -> Decimal:
        """Add a strictly positive ``amount`` and return the new balance."""

        value = _validate_positive(amount)
        with self._lock:
            balance = self.read_balance()
            with localcontext(MONEY_CONTEXT):
                total = balance + value
            updated = self.write_balance(total)
        LOGGER.info("Credited %s; balance %s -> %s", value, balance, updated)
        return updated

    def debit(self, amount: Amount) -> Decimal:
        """Subtract ``amount`` when funds allow, otherwise raise ``InsufficientFunds``."""

        value = _validate_positive(amount)
        with self._lock:
            balance = self.read_balance()
            if balance < value:
                LOGGER.warning("Rejected debit of %s against balance %s", value, balance)
                raise InsufficientFunds(balance, value)
            with localcontext(MONEY_CONTEXT):
                remaining = balance - value
            updated = self.write_balance(remaining)
        LOGGER.info("Debited %s; balance %s -> %s", value, balance, updated)
        return updated

    def _persist(self, amount: Decimal) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = BalanceRecord(balance=amount).to_json()
        handle = tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            delete=False,
        )
        try:
            with handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(handle.name, self._path)
        except BaseException:
            Path(handle.name).unlink(missing_ok=True)
            raise
