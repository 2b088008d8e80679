"""Domain entities - Payment records owned by the repository."""

from payments_reporting.domain.entities.payment import Payment
from payments_reporting.domain.entities.payment_item import PaymentItem
from payments_reporting.domain.entities.user import User

__all__ = [
    "Payment",
    "PaymentItem",
    "User",
]
