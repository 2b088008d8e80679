from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from payments_reporting.domain.entities import Payment


class PaymentRepository(ABC):
    """Port for reading the payment snapshot.

    Contract:
    - find_all() returns every payment currently held, possibly none
    - No filtering, ordering or pagination is implied by the contract
    - The returned sequence MUST NOT change while a query iterates it
    - find_all() is side-effect free and idempotent from the caller's view

    Errors raised by an implementation (e.g., backend unreachable) are not
    caught by the query service; they reach the caller unchanged.
    """

    @abstractmethod
    def find_all(self) -> Sequence[Payment]:
        """Return the complete current snapshot of payments."""
