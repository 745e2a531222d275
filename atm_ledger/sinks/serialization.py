"""Shared amount coercion and formatting utilities."""

from decimal import (
    ROUND_HALF_UP,
    Decimal,
    DecimalException,
    Inexact,
    InvalidOperation,
    localcontext,
)
from typing import Any, Callable

from atm_ledger.exceptions import InvalidAmountError

CENTS = Decimal("0.01")
DEFAULT_PRECISION = 28


def to_amount(value: Any) -> Decimal:
    """Coerce a cash amount to ``Decimal``.

    Floats go through ``str`` so ``300.30`` becomes ``Decimal("300.3")``
    rather than its binary expansion.

    Parameters
    ----------
    value : Any
        ``Decimal``, ``int``, ``float`` or numeric ``str``.

    Returns
    -------
    Decimal
        Exact decimal amount.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Amount must be a number, got {value!r}") from exc
    else:
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    return amount


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two decimals, rounding half up."""
    with localcontext() as ctx:
        ctx.prec = max(DEFAULT_PRECISION, amount.adjusted() + 4)
        try:
            return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))
        except DecimalException as exc:
            raise InvalidAmountError(f"Amount cannot be rendered: {amount}") from exc


def add_amounts(balance: Decimal, amount: Decimal) -> Decimal:
    """Return ``balance + amount`` without rounding, whatever the magnitudes."""
    return _exact(balance, amount, lambda a, b: a + b)


def subtract_amounts(balance: Decimal, amount: Decimal) -> Decimal:
    """Return ``balance - amount`` without rounding, whatever the magnitudes."""
    return _exact(balance, amount, lambda a, b: a - b)


def _exact(a: Decimal, b: Decimal, op: Callable[[Decimal, Decimal], Decimal]) -> Decimal:
    # Enough digits to span both operands plus a carry
    span = max(a.adjusted(), b.adjusted()) - min(a.as_tuple().exponent, b.as_tuple().exponent)
    with localcontext() as ctx:
        ctx.prec = max(DEFAULT_PRECISION, span + 2)
        ctx.traps[Inexact] = True
        try:
            return op(a, b)
        except DecimalException as exc:
            raise InvalidAmountError(f"Amount out of range: {b}") from exc


def account_to_dict(credential: Any, account: Any) -> dict:
    """Convert an account to a display dict, omitting the PIN."""
    return {
        "account_number": credential.account_number,
        "owner_name": account.owner_name,
        "balance": format_amount(account.balance),
    }
