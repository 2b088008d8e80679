from __future__ import annotations

from dataclasses import dataclass

from payments_reporting.domain.exceptions import InvalidEmailError


@dataclass(frozen=True, slots=True)
class User:
    """Buyer referenced by a payment.

    The email is a lookup key and is stored verbatim: no trimming and
    no case folding, so "A@b.com" and "a@b.com" are different users.
    """

    email: str

    def __post_init__(self) -> None:
        if not isinstance(self.email, str) or not self.email:
            raise InvalidEmailError(f"User email must be a non-empty string, got {self.email!r}")

    def has_email(self, email: str | None) -> bool:
        return email is not None and self.email == email
