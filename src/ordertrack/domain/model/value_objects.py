"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ordertrack.domain.exceptions import ValidationError


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce a user or backend supplied number to Decimal.

    Floats go through ``str`` so ``1.1`` stays ``Decimal("1.1")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValidationError(f"Invalid number: {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid number: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid number: {value!r}")
    return result


def plain(value: Decimal) -> str:
    """Render a Decimal without exponent or trailing zeros (``1.50`` -> ``1.5``)."""
    text = format(value.normalize(), "f")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so that ``1.5 * 180`` is exactly ``270``. Amounts may be
    negative: an overpaid order has a negative balance due.
    """

    amount: Decimal
    currency: str = "INR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency} {plain(self.amount)}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A quantity; fractional values are weights (e.g. 1.25 kg).

    ``of()`` is the entry point for new input and rejects non-positive values.
    The constructor accepts any Decimal so stored rows can be read back as-is.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Quantity must be a Decimal, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return plain(self.value)

    @staticmethod
    def of(value: str | float | int | Decimal) -> Quantity:
        quantity = Quantity(to_decimal(value))
        if quantity.value <= 0:
            raise ValidationError("Quantity must be positive")
        return quantity
