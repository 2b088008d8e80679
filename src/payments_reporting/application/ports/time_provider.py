from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for time operations.

    Contract:
    - now() MUST return a timezone-aware datetime
    - The zone of the returned datetime defines what "current month"
      and "today" mean for queries

    Query code never calls datetime.now() directly; the clock is always
    injected so that tests can pin it.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...
