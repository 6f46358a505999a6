"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

USD = "USD"
KHR = "KHR"

_SYMBOLS = {USD: "$", KHR: "៛"}


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Only the two storefront
    currencies (USD and KHR) are supported.
    """

    amount: Decimal
    currency: str = USD

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.currency not in _SYMBOLS:
            raise ValidationError(f"Unsupported currency: {self.currency!r}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        symbol = _SYMBOLS[self.currency]
        if self.currency == KHR:
            # Riel has no subunit in common use.
            return f"{symbol}{self.amount:,.0f}"
        return f"{symbol}{self.amount:,.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = USD) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = USD) -> Money:
        return Money(Decimal("0"), currency)
