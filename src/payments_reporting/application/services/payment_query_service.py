from __future__ import annotations

import logging
from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from payments_reporting.application.dtos import MonthlySummary
from payments_reporting.domain.entities.payment_item import ZERO
from payments_reporting.domain.exceptions import InvalidArgumentError
from payments_reporting.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from payments_reporting.application.ports import PaymentRepository, TimeProvider
    from payments_reporting.domain.entities import Payment, PaymentItem

logger = logging.getLogger(__name__)


class PaymentQueryService:
    """Read-only queries over the full payment snapshot.

    Every query follows the same shape:
    1. Fetch the snapshot once via PaymentRepository.find_all()
    2. Read the clock at most once (queries relative to "now")
    3. Apply a single sort, filter or reduction and return a new container

    Sorts are stable: payments with equal keys keep repository order.
    Sums are Decimal and start from zero, so empty input yields Decimal("0").
    Repository and clock errors propagate unchanged.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        time_provider: TimeProvider,
    ) -> None:
        self._payment_repo = payment_repository
        self._time_provider = time_provider

    # =========================================================================
    # Sorting
    # =========================================================================

    def sorted_by_date_ascending(self) -> list[Payment]:
        result = sorted(self._snapshot(), key=_payment_date)
        logger.debug("sorted_by_date_ascending returned %d payments", len(result))
        return result

    def sorted_by_date_descending(self) -> list[Payment]:
        # reverse=True keeps equal dates in repository order
        result = sorted(self._snapshot(), key=_payment_date, reverse=True)
        logger.debug("sorted_by_date_descending returned %d payments", len(result))
        return result

    def sorted_by_item_count_ascending(self) -> list[Payment]:
        result = sorted(self._snapshot(), key=_item_count)
        logger.debug("sorted_by_item_count_ascending returned %d payments", len(result))
        return result

    def sorted_by_item_count_descending(self) -> list[Payment]:
        result = sorted(self._snapshot(), key=lambda payment: -payment.item_count)
        logger.debug("sorted_by_item_count_descending returned %d payments", len(result))
        return result

    # =========================================================================
    # Date filters
    # =========================================================================

    def for_month(self, year_month: YearMonth) -> list[Payment]:
        """Return payments dated in the given month, in repository order."""
        _require_year_month(year_month)
        result = self._in_month(self._snapshot(), year_month)
        logger.debug("for_month(%s) matched %d payments", year_month, len(result))
        return result

    def for_current_month(self) -> list[Payment]:
        """Return payments dated in the clock's current (year, month)."""
        current_month = self._current_month()
        result = self._in_month(self._snapshot(), current_month)
        logger.debug("for_current_month(%s) matched %d payments", current_month, len(result))
        return result

    def for_last_days(self, days: int) -> list[Payment]:
        """Return payments from the last ``days`` days.

        With ``cutoff = now - days``, a payment qualifies when its calendar
        year equals cutoff's year AND its day-of-year is strictly greater
        than cutoff's day-of-year.

        The rule compares day-of-year numbers within a single calendar
        year. A window that starts in December and ends in January only
        matches the December part; January payments are excluded because
        their year differs from cutoff's year. This is kept as-is for
        compatibility.

        Args:
            days: Non-negative window length in days.

        Raises:
            InvalidArgumentError: If days is negative or not an integer.
        """
        if isinstance(days, bool) or not isinstance(days, int):
            raise InvalidArgumentError(f"days must be an integer, got {days!r}")

        if days < 0:
            raise InvalidArgumentError(f"days cannot be negative, got {days}")

        now = self._time_provider.now()
        try:
            cutoff = now - timedelta(days=days)
        except OverflowError as e:
            raise InvalidArgumentError(f"days={days} reaches before the calendar start") from e

        if cutoff.year != now.year:
            logger.warning(
                "for_last_days(%d) window crosses a year boundary (%s -> %s); "
                "payments after %d-12-31 are not matched",
                days,
                cutoff.date().isoformat(),
                now.date().isoformat(),
                cutoff.year,
            )

        cutoff_day_of_year = cutoff.timetuple().tm_yday
        payments = self._snapshot()
        result = [
            payment
            for payment in payments
            if payment.payment_date.year == cutoff.year
            and payment.day_of_year > cutoff_day_of_year
        ]
        logger.debug(
            "for_last_days(%d) matched %d of %d payments", days, len(result), len(payments)
        )
        return result

    # =========================================================================
    # Set projections
    # =========================================================================

    def with_exactly_one_item(self) -> set[Payment]:
        result = {payment for payment in self._snapshot() if payment.item_count == 1}
        logger.debug("with_exactly_one_item returned %d payments", len(result))
        return result

    def product_names_sold_in_current_month(self) -> set[str]:
        current_month = self._current_month()
        payments = self._in_month(self._snapshot(), current_month)
        result = {item.name for payment in payments for item in payment.items}
        logger.debug(
            "product_names_sold_in_current_month(%s) returned %d names",
            current_month,
            len(result),
        )
        return result

    def payments_with_value_over(self, threshold: int | Decimal) -> set[Payment]:
        """Return payments whose summed final price is strictly above threshold.

        A payment whose total equals the threshold is excluded.

        Raises:
            InvalidArgumentError: If threshold is not an int or a finite Decimal.
        """
        if isinstance(threshold, bool) or not isinstance(threshold, (int, Decimal)):
            raise InvalidArgumentError(
                f"threshold must be an int or Decimal, got {type(threshold).__name__}"
            )

        limit = Decimal(threshold)
        if not limit.is_finite():
            raise InvalidArgumentError(f"threshold must be finite, got {limit}")

        result = {
            payment for payment in self._snapshot() if payment.total_final_price() > limit
        }
        logger.debug("payments_with_value_over(%s) returned %d payments", limit, len(result))
        return result

    # =========================================================================
    # Aggregations
    # =========================================================================

    def total_for_month(self, year_month: YearMonth) -> Decimal:
        """Sum of final prices of all items paid in the given month."""
        _require_year_month(year_month)
        payments = self._in_month(self._snapshot(), year_month)
        result = sum((payment.total_final_price() for payment in payments), ZERO)
        logger.debug(
            "total_for_month(%s) summed %d payments to %s", year_month, len(payments), result
        )
        return result

    def total_discount_for_month(self, year_month: YearMonth) -> Decimal:
        """Sum of per-item discounts (regular - final) in the given month."""
        _require_year_month(year_month)
        payments = self._in_month(self._snapshot(), year_month)
        result = sum((payment.total_discount() for payment in payments), ZERO)
        logger.debug(
            "total_discount_for_month(%s) summed %d payments to %s",
            year_month,
            len(payments),
            result,
        )
        return result

    def summary_for_month(self, year_month: YearMonth) -> MonthlySummary:
        """Counts and sums for one month, computed from a single snapshot."""
        _require_year_month(year_month)
        payments = self._in_month(self._snapshot(), year_month)
        logger.debug("summary_for_month(%s) covers %d payments", year_month, len(payments))

        return MonthlySummary(
            year_month=year_month,
            payment_count=len(payments),
            item_count=sum(payment.item_count for payment in payments),
            total=sum((payment.total_final_price() for payment in payments), ZERO),
            total_discount=sum((payment.total_discount() for payment in payments), ZERO),
        )

    # =========================================================================
    # User lookup
    # =========================================================================

    def items_for_user_email(self, email: str | None) -> list[PaymentItem]:
        """Return items of all payments made by the user with this exact email.

        Matching is case-sensitive and whole-string. A None email matches
        nothing and returns an empty list.
        """
        if email is None:
            return []

        result = [
            item
            for payment in self._snapshot()
            if payment.user.has_email(email)
            for item in payment.items
        ]
        logger.debug("items_for_user_email returned %d items", len(result))
        return result

    # =========================================================================
    # Helpers
    # =========================================================================

    def _snapshot(self) -> Sequence[Payment]:
        payments = self._payment_repo.find_all()
        logger.debug("Fetched payment snapshot with %d payments", len(payments))
        return payments

    def _current_month(self) -> YearMonth:
        return YearMonth.from_datetime(self._time_provider.now())

    @staticmethod
    def _in_month(payments: Sequence[Payment], year_month: YearMonth) -> list[Payment]:
        return [payment for payment in payments if payment.is_in_month(year_month)]


def _payment_date(payment: Payment) -> datetime:
    return payment.payment_date


def _item_count(payment: Payment) -> int:
    return payment.item_count


def _require_year_month(year_month: YearMonth) -> None:
    if not isinstance(year_month, YearMonth):
        raise InvalidArgumentError(
            f"year_month must be a YearMonth, got {type(year_month).__name__}"
        )
