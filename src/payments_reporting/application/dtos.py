"""Data Transfer Objects for query output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    from payments_reporting.domain.value_objects import YearMonth


@dataclass(frozen=True)
class MonthlySummary:
    """Aggregated figures for the payments of one calendar month."""

    year_month: YearMonth
    payment_count: int
    item_count: int
    total: Decimal
    total_discount: Decimal
