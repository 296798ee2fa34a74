"""Two-decimal fixed-point money helpers.

Every monetary value in the ledger goes through :func:`to_money`, which
quantizes to cents with ``ROUND_HALF_UP``. Floats are converted through
their ``str()`` form so ``1500.1`` means ``Decimal("1500.1")`` rather than
its binary approximation.
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import ContextManager

from realty_ledger.exceptions import InvalidArgumentError

MoneyLike = Decimal | int | float | str

CENTS = Decimal("0.01")
RATIO_PLACES = Decimal("0.000001")
HUNDRED = Decimal(100)
ZERO = Decimal("0.00")


def to_money(value: MoneyLike | None, name: str = "amount") -> Decimal:
    """Normalize a monetary input to a 2-decimal ``Decimal``.

    Parameters
    ----------
    value : Decimal | int | float | str | None
        Raw amount.
    name : str
        Argument name used in error messages.

    Returns
    -------
    Decimal
        Amount quantized to cents, half-up.

    Raises
    ------
    InvalidArgumentError
        If ``value`` is None, a bool, or not a finite number.
    """
    return round_money(_parse(value, name))


def to_non_negative_money(value: MoneyLike | None, name: str = "amount") -> Decimal:
    """Like :func:`to_money` but rejects amounts below zero.

    The sign is checked before rounding, so ``-0.001`` is rejected too.
    """
    amount = _parse(value, name)
    if amount < 0:
        raise InvalidArgumentError(f"{name} must not be negative, got {value!r}")
    return round_money(amount)


def _parse(value: MoneyLike | None, name: str) -> Decimal:
    if value is None:
        raise InvalidArgumentError(f"{name} is required")
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"{name} must be a number, got {value!r}") from exc
    else:
        raise InvalidArgumentError(f"{name} must be a number, got {type(value).__name__}")
    if not amount.is_finite():
        raise InvalidArgumentError(f"{name} must be finite, got {value!r}")
    return amount


def exact() -> ContextManager[Context]:
    """Decimal context in which addition, multiplication and ``quantize`` never round.

    Ledger amounts have no upper bound, so money arithmetic must not be
    limited to the default 28 significant digits.
    """
    return localcontext(
        Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)
    )


def round_money(amount: Decimal) -> Decimal:
    """Quantize an exact ``Decimal`` to cents, half-up.

    Negative zero collapses to ``0.00``.
    """
    with exact():
        rounded = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    return rounded if rounded else ZERO


def ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide to six decimal places, rounding half-up.

    The quotient is truncated at high precision first so the final half-up
    step sees the true digits rather than a context-rounded value.
    """
    digits = max(numerator.adjusted() - denominator.adjusted(), 0)
    with localcontext() as ctx:
        ctx.prec = digits + 60
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.rounding = ROUND_DOWN
        quotient = numerator / denominator
        return quotient.quantize(RATIO_PLACES, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    """Render with exactly two decimals, no separators."""
    with exact():
        return f"{round_money(amount):.2f}"
