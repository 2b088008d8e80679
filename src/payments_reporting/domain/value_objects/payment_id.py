from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class PaymentId:
    """Identity of a payment record.

    Part of Payment's value equality: two payments with the same items,
    date and user are still distinct when their ids differ.
    """

    value: UUID

    @classmethod
    def generate(cls) -> PaymentId:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)
