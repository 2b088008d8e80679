"""Shared pytest fixtures for the test suite."""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from decimal import Decimal

import pytest

from payments_reporting.domain.entities import Payment, PaymentItem, User
from payments_reporting.infrastructure.payment_repository import InMemoryPaymentRepository
from payments_reporting.infrastructure.time_provider import FixedTimeProvider

PaymentFactory = Callable[..., Payment]


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2023, 5, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def payment_repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def user() -> User:
    return User(email="a@b.com")


@pytest.fixture
def make_payment(user: User) -> PaymentFactory:
    """Build payments from (name, regular, final) tuples or plain final prices."""

    def _make(
        payment_date: datetime,
        prices: Iterable[int | str | tuple[str, int | str, int | str]] = (),
        buyer: User | None = None,
    ) -> Payment:
        items = []
        for index, price in enumerate(prices):
            if isinstance(price, tuple):
                name, regular, final = price
            else:
                name, regular, final = f"product-{index}", price, price
            items.append(PaymentItem.create(name, Decimal(regular), Decimal(final)))
        return Payment.create(payment_date=payment_date, user=buyer or user, items=items)

    return _make
