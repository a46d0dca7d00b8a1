"""Rupiah amounts as Decimal. Keeps binary float noise out of tax math."""

from contextlib import contextmanager
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Annotated, Iterable

from pydantic import BeforeValidator

from core.exceptions import InvalidAmountError

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """
    Convert int, float, str or Decimal to a finite Decimal.

    Floats go through repr() so 0.1 becomes Decimal("0.1"), not its
    binary expansion.

    Raises:
        InvalidAmountError: Value is NaN, infinite, or not a number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            result = Decimal(repr(value) if isinstance(value, float) else value.strip())
        except InvalidOperation:
            raise InvalidAmountError(value)
    else:
        raise InvalidAmountError(value)

    if not result.is_finite():
        raise InvalidAmountError(value)
    return result


def _width(amount: Decimal) -> int:
    # Digits needed to hold amount exactly, counted from the decimal point
    _, digits, exponent = amount.as_tuple()
    return len(digits) + abs(exponent)


@contextmanager
def exact_context(*amounts: Decimal):
    """
    Decimal context in which +, - and * on amounts never round.

    Built fresh rather than copied from the caller's thread context, so
    results depend only on the operands. Division is limited to /100,
    which is always exact.
    """
    prec = max(28, sum(_width(amount) for amount in amounts) + 8)
    context = Context(
        prec=prec,
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )
    with localcontext(context) as ctx:
        yield ctx


def exact_sum(amounts: Iterable[Decimal]) -> Decimal:
    """Sum without rounding, whatever the caller's decimal context."""
    amounts = list(amounts)
    with exact_context(*amounts):
        return sum(amounts, ZERO)


def percent_of(base: Decimal, rate: Decimal) -> Decimal:
    """base * rate / 100, exact."""
    with exact_context(base, rate):
        return base * rate / HUNDRED


def round_to_cents(amount: Decimal) -> Decimal:
    """
    Round half-up to two decimals.

    The context is sized to the amount, so large values are never rejected
    for exceeding the default 28-digit precision.
    """
    with exact_context(amount):
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def split_rupiah(amount: Decimal) -> tuple[int, int]:
    """Split a non-negative amount into (rupiah, sen) after cent rounding."""
    with exact_context(amount):
        cents = int(amount.quantize(CENT, rounding=ROUND_HALF_UP).scaleb(2))
    return divmod(cents, 100)


# Pydantic field types: accept the same inputs as to_decimal()
ExactDecimal = Annotated[Decimal, BeforeValidator(to_decimal)]
Rupiah = ExactDecimal
