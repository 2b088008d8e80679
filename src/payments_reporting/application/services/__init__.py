"""Services - Read-only queries over the payment snapshot."""

from payments_reporting.application.services.payment_query_service import PaymentQueryService

__all__ = [
    "PaymentQueryService",
]
