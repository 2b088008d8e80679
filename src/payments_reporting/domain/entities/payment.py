"""Payment entity and its read-only projections.

Payments are created and destroyed outside this package; the query layer
only reads them. Every derived value is computed from the item tuple, so
an empty payment yields zero totals rather than failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_reporting.domain.entities.payment_item import ZERO, PaymentItem
from payments_reporting.domain.exceptions import InvalidPaymentDateError
from payments_reporting.domain.value_objects import PaymentId, YearMonth

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime
    from decimal import Decimal

    from payments_reporting.domain.entities.user import User


@dataclass(frozen=True, slots=True)
class Payment:
    """One purchase transaction: a date, a buyer and its line items.

    Payment is immutable (frozen dataclass) and compares by value over all
    fields. Set-valued queries rely on this equality to collapse duplicates.

    Invariants:
        - payment_date is timezone-aware
        - items is a tuple (lists are converted on construction)
    """

    id: PaymentId
    payment_date: datetime
    user: User
    items: tuple[PaymentItem, ...] = ()

    def __post_init__(self) -> None:
        if self.payment_date.tzinfo is None or self.payment_date.utcoffset() is None:
            raise InvalidPaymentDateError(
                f"payment_date must be timezone-aware, got {self.payment_date.isoformat()}"
            )

        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def create(
        cls,
        payment_date: datetime,
        user: User,
        items: Iterable[PaymentItem] = (),
    ) -> Payment:
        """Factory method to create a Payment with a freshly generated id."""
        return cls(
            id=PaymentId.generate(),
            payment_date=payment_date,
            user=user,
            items=tuple(items),
        )

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def year_month(self) -> YearMonth:
        return YearMonth.from_datetime(self.payment_date)

    @property
    def day_of_year(self) -> int:
        """Ordinal day within the payment date's own calendar year (1..366)."""
        return self.payment_date.timetuple().tm_yday

    def is_in_month(self, year_month: YearMonth) -> bool:
        return year_month.contains(self.payment_date)

    def total_final_price(self) -> Decimal:
        """Sum of final prices over all items; zero for an empty payment."""
        return sum((item.final_price for item in self.items), ZERO)

    def total_discount(self) -> Decimal:
        """Sum of per-item discounts; zero for an empty payment."""
        return sum((item.discount for item in self.items), ZERO)

    def item_names(self) -> list[str]:
        return [item.name for item in self.items]
