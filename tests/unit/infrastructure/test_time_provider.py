"""Tests for TimeProvider implementations.

Tests cover:
- SystemTimeProvider returns an aware datetime in its configured zone
- FixedTimeProvider returns fixed time and supports set_time() / advance()
- Naive datetimes are rejected
"""

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from payments_reporting.application.ports import TimeProvider
from payments_reporting.infrastructure.time_provider import (
    FixedTimeProvider,
    SystemTimeProvider,
)

# =============================================================================
# SystemTimeProvider Tests
# =============================================================================


class TestSystemTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        assert isinstance(SystemTimeProvider(), TimeProvider)

    def test_now_defaults_to_utc(self) -> None:
        provider = SystemTimeProvider()

        assert provider.now().tzinfo is UTC

    def test_now_uses_configured_zone(self) -> None:
        warsaw = ZoneInfo("Europe/Warsaw")
        provider = SystemTimeProvider(warsaw)

        result = provider.now()

        assert result.tzinfo is warsaw
        assert provider.tz is warsaw

    def test_now_returns_current_time(self) -> None:
        provider = SystemTimeProvider()
        before = datetime.now(UTC)

        result = provider.now()

        after = datetime.now(UTC)
        assert before <= result <= after


# =============================================================================
# FixedTimeProvider Tests
# =============================================================================


class TestFixedTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        provider = FixedTimeProvider(datetime(2023, 5, 15, tzinfo=UTC))

        assert isinstance(provider, TimeProvider)

    def test_now_returns_same_time_on_successive_calls(self) -> None:
        fixed_time = datetime(2023, 5, 15, 12, 0, tzinfo=UTC)
        provider = FixedTimeProvider(fixed_time)

        assert provider.now() == provider.now() == fixed_time

    def test_accepts_non_utc_zone(self) -> None:
        fixed_time = datetime(2023, 5, 15, 12, 0, tzinfo=ZoneInfo("America/New_York"))

        provider = FixedTimeProvider(fixed_time)

        assert provider.now() == fixed_time

    def test_set_time_changes_returned_time(self) -> None:
        provider = FixedTimeProvider(datetime(2023, 5, 15, tzinfo=UTC))
        new_time = datetime(2023, 6, 1, tzinfo=UTC)

        provider.set_time(new_time)

        assert provider.now() == new_time

    def test_advance_moves_time(self) -> None:
        provider = FixedTimeProvider(datetime(2023, 12, 31, 23, 0, tzinfo=UTC))

        provider.advance(timedelta(hours=2))

        assert provider.now() == datetime(2024, 1, 1, 1, 0, tzinfo=UTC)


class TestFixedTimeProviderValidation:
    def test_creation_raises_for_naive_datetime(self) -> None:
        with pytest.raises(ValueError, match="timezone-aware"):
            FixedTimeProvider(datetime(2023, 5, 15, 12, 0))

    def test_set_time_raises_for_naive_datetime(self) -> None:
        provider = FixedTimeProvider(datetime(2023, 5, 15, tzinfo=UTC))

        with pytest.raises(ValueError, match="timezone-aware"):
            provider.set_time(datetime(2023, 5, 16))

    def test_accepts_fixed_offset(self) -> None:
        offset_time = datetime(2023, 5, 15, tzinfo=timezone(timedelta(hours=6)))

        assert FixedTimeProvider(offset_time).now() == offset_time
