"""Domain layer - Payment records and the rules for reading them.

This layer contains:
- Entities: Payment, PaymentItem and User as held by the repository
- Value Objects: Immutable objects defined by their attributes (e.g., YearMonth, PaymentId)
- Domain Exceptions: Validation failures and invalid query arguments

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
