"""Entrypoints layer - Wiring for applications embedding the query service.

Entrypoints read configuration, build infrastructure adapters and hand
callers a ready PaymentQueryService.
"""

from payments_reporting.entrypoints.bootstrap import build_payment_query_service

__all__ = [
    "build_payment_query_service",
]
