"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: str | float | int | Decimal, field: str) -> Decimal:
    """Coerce user input to Decimal via ``str`` so floats keep their repr."""
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number, got {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"{field} must be a number, got {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"{field} must be a finite number, got {value!r}")
    return result


def round2(amount: Decimal) -> Decimal:
    """Round to whole cents, half away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would
    accumulate across repeated price updates.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < ZERO:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < ZERO:
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount, "Money amount"))


@dataclass(frozen=True)
class Percentage:
    """A percentage between 0 and 100 inclusive."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Percentage must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < ZERO or self.value > HUNDRED:
            raise ValidationError(
                f"Percentage must be between 0 and 100, got {self.value}"
            )

    def __str__(self) -> str:
        return f"{self.value.normalize():f}%"

    @staticmethod
    def of(value: str | float | int | Decimal) -> Percentage:
        return Percentage(to_decimal(value, "Percentage"))
