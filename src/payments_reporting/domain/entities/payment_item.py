from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from payments_reporting.domain.exceptions import InvalidPriceError

ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """One purchased product line of a payment.

    regular_price is the pre-discount price and final_price the price
    actually paid. final_price <= regular_price is expected but not
    enforced, so a discount may come out negative.

    Use the create() factory method to construct instances from raw input.
    """

    name: str
    regular_price: Decimal
    final_price: Decimal

    @classmethod
    def create(
        cls,
        name: str,
        regular_price: Decimal | int | str,
        final_price: Decimal | int | str,
    ) -> PaymentItem:
        """Factory method to create a PaymentItem with price coercion.

        Args:
            name: Product name.
            regular_price: Price before discount.
            final_price: Price after discount.

        Returns:
            A new PaymentItem with both prices as Decimal.

        Raises:
            InvalidPriceError: If a price is a float, not numeric, not finite,
                or negative.
        """
        return cls(
            name=name,
            regular_price=_to_price(regular_price, "regular_price"),
            final_price=_to_price(final_price, "final_price"),
        )

    @property
    def discount(self) -> Decimal:
        """Discount granted on this line (regular_price - final_price)."""
        return self.regular_price - self.final_price


def _to_price(value: Decimal | int | str, field_name: str) -> Decimal:
    # float input is rejected
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str)):
        raise InvalidPriceError(
            f"{field_name} must be Decimal, int or str, got {type(value).__name__}"
        )

    try:
        price = value if isinstance(value, Decimal) else Decimal(value)
    except InvalidOperation as e:
        raise InvalidPriceError(f"{field_name} is not a number: {value!r}") from e

    if not price.is_finite():
        raise InvalidPriceError(f"{field_name} must be finite, got {price}")

    if price < ZERO:
        raise InvalidPriceError(f"{field_name} cannot be negative, got {price}")

    return price
