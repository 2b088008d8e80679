from __future__ import annotations

from typing import TYPE_CHECKING

from payments_reporting.application.ports import PaymentRepository

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payments_reporting.domain.entities import Payment


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository for tests and embedded use.

    Implementation notes:
    - Keeps payments in insertion order; find_all() preserves that order
    - find_all() returns a tuple snapshot, so later add() calls never
      change a snapshot a query is already iterating
    - No copying of entities: Payment and its parts are frozen dataclasses
    - NOT thread-safe; concurrent add() and find_all() need external locking
    """

    def __init__(self, payments: Iterable[Payment] = ()) -> None:
        self._payments: list[Payment] = list(payments)

    def find_all(self) -> tuple[Payment, ...]:
        return tuple(self._payments)

    def add(self, payment: Payment) -> None:
        self._payments.append(payment)

    def add_all(self, payments: Iterable[Payment]) -> None:
        self._payments.extend(payments)
