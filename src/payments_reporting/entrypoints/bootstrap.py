from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payments_reporting.application.services import PaymentQueryService
from payments_reporting.config import Settings
from payments_reporting.infrastructure.time_provider import SystemTimeProvider

if TYPE_CHECKING:
    from payments_reporting.application.ports import PaymentRepository, TimeProvider

logger = logging.getLogger(__name__)


def build_payment_query_service(
    payment_repository: PaymentRepository,
    settings: Settings | None = None,
    time_provider: TimeProvider | None = None,
) -> PaymentQueryService:
    """Build a PaymentQueryService for the given repository.

    Args:
        payment_repository: Source of the payment snapshot.
        settings: Runtime settings; loaded from the environment when omitted.
        time_provider: Clock override. Defaults to the system clock in
            the configured timezone.

    Returns:
        A PaymentQueryService bound to the repository and clock.
    """
    if settings is None:
        settings = Settings.from_env()

    if time_provider is None:
        time_provider = SystemTimeProvider(settings.tz)

    logger.info("Payment query service configured with timezone %s", settings.timezone)
    return PaymentQueryService(
        payment_repository=payment_repository,
        time_provider=time_provider,
    )
