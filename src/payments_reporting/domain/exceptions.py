"""Domain exceptions for payments-reporting.

Exception hierarchy:
    DomainException (base)
    ├── Query Errors
    │   └── InvalidArgumentError
    └── Validation Errors
        ├── InvalidPaymentDateError
        ├── InvalidYearMonthError
        ├── InvalidPriceError
        └── InvalidEmailError

Empty query results are never errors: an empty repository, an empty item
list or a month without payments yields an empty collection or zero.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from collaborator errors,
    which propagate unchanged.
    """


# =============================================================================
# Query Errors
# =============================================================================


class InvalidArgumentError(DomainException):
    """Raised when a query receives an argument it cannot evaluate.

    Examples:
        - negative day count for the last-N-days query
        - a month argument that is not a YearMonth
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidPaymentDateError(DomainException):
    """Raised when a payment date is missing its timezone.

    Payment dates are compared and sorted against each other and against
    the clock, so they must all be timezone-aware.
    """


class InvalidYearMonthError(DomainException):
    """Raised when a (year, month) pair is outside the calendar.

    Month must be in 1..12 and year in 1..9999.
    """


class InvalidPriceError(DomainException):
    """Raised when an item price cannot be represented as a finite,
    non-negative Decimal.

    Note: final_price <= regular_price is NOT validated here.
    """


class InvalidEmailError(DomainException):
    """Raised when a user is created with an empty email."""
