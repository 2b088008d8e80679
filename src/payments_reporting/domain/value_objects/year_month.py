from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_reporting.domain.exceptions import InvalidYearMonthError

if TYPE_CHECKING:
    from datetime import date, datetime

MIN_YEAR = 1
MAX_YEAR = 9999
_YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A calendar month identified by (year, month), ignoring day and time.

    Instances order chronologically and are hashable, so they can be used
    as grouping keys.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        for field_name in ("year", "month"):
            field_value = getattr(self, field_name)
            if isinstance(field_value, bool) or not isinstance(field_value, int):
                raise InvalidYearMonthError(
                    f"{field_name} must be an integer, got {field_value!r}"
                )

        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidYearMonthError(
                f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {self.year}"
            )

        if not 1 <= self.month <= 12:
            raise InvalidYearMonthError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def from_datetime(cls, value: datetime | date) -> YearMonth:
        """Take the year and month from the value's own calendar fields.

        No timezone conversion happens: a datetime at 2023-01-31T23:00-05:00
        belongs to January even though it is February in UTC.
        """
        return cls(year=value.year, month=value.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse an ISO-8601 ``YYYY-MM`` string.

        Raises:
            InvalidYearMonthError: If the text is not in ``YYYY-MM`` form
                or names a month outside the calendar.
        """
        match = _YEAR_MONTH_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise InvalidYearMonthError(f"Expected YYYY-MM, got {text!r}")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def next(self) -> YearMonth:
        if self.month == 12:
            return YearMonth(self.year + 1, 1)
        return YearMonth(self.year, self.month + 1)

    def previous(self) -> YearMonth:
        if self.month == 1:
            return YearMonth(self.year - 1, 12)
        return YearMonth(self.year, self.month - 1)

    def contains(self, value: datetime | date) -> bool:
        """Check whether the value's calendar (year, month) is this month."""
        return value.year == self.year and value.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
