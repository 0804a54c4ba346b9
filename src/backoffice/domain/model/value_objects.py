"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from backoffice.domain.exceptions import ValidationError, ValidationReason

MONEY_PRECISION = 2
MONEY_INTEGER_DIGITS = 10


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}",
                ValidationReason.INVALID_PRICE,
            )
        if not self.amount.is_finite():
            raise ValidationError(
                f"Money amount must be finite, got {self.amount}",
                ValidationReason.INVALID_PRICE,
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}",
                ValidationReason.INVALID_PRICE,
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Queries --------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def fractional_digits(self) -> int:
        """Number of decimal places the amount was written with."""
        exponent = self.amount.normalize().as_tuple().exponent
        return max(0, -exponent)  # type: ignore[operator]

    @property
    def integer_digits(self) -> int:
        return len(str(abs(int(self.amount))))

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Floats are refused: by the time a float exists the binary
        rounding has already happened.
        """
        if isinstance(amount, (float, bool)):
            raise ValidationError(
                f"Invalid money amount: {amount!r}", ValidationReason.INVALID_PRICE
            )
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(
                f"Invalid money amount: {amount!r}", ValidationReason.INVALID_PRICE
            ) from exc


def require_price(price: Money, label: str = "Unit price") -> None:
    """Reject zero prices, prices finer than cents and over ten integer digits."""
    if price.is_zero:
        raise ValidationError(
            f"{label} must be greater than zero", ValidationReason.INVALID_PRICE
        )
    if price.fractional_digits > MONEY_PRECISION:
        raise ValidationError(
            f"{label} {price.amount} has more than {MONEY_PRECISION} decimal places",
            ValidationReason.PRICE_PRECISION,
        )
    if price.integer_digits > MONEY_INTEGER_DIGITS:
        raise ValidationError(
            f"{label} {price.amount} has more than {MONEY_INTEGER_DIGITS} integer digits",
            ValidationReason.PRICE_PRECISION,
        )


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}",
                ValidationReason.INVALID_QUANTITY,
            )
        if self.value <= 0:
            raise ValidationError(
                "Quantity must be positive", ValidationReason.INVALID_QUANTITY
            )

    def __str__(self) -> str:
        return str(self.value)
