"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .account import Account
from .email import Email


class PasswordService(Protocol):
    """Port interface for password policy and hashing."""

    def validate(self, plain_password: str) -> bool:
        """
        Decide whether a password satisfies the strength policy.

        Weak passwords are reported through the return value, never
        by raising.

        Args:
            plain_password: Candidate password in plaintext

        Returns:
            True if the password is acceptable
        """
        ...

    def hash(self, plain_password: str) -> str:
        """
        Produce a one-way hash of a password for storage.

        Args:
            plain_password: Password that already passed validate()

        Returns:
            Hash representation (e.g. bcrypt modular crypt string)
        """
        ...


class IdGenerator(Protocol):
    """Port interface for account identifier generation."""

    def generate(self) -> str:
        """Return a new identifier, unique for the lifetime of the system."""
        ...


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def find_by_email(self, email: Email) -> Account | None:
        """
        Look up an account by email.

        Args:
            email: Normalized email value object

        Returns:
            The stored account, or None if no account uses this email
        """
        ...

    def save(self, account: Account) -> None:
        """
        Insert a new account.

        Implementations must never overwrite an existing account: a
        duplicate id or email is rejected. The storage layer is the
        integrity boundary for concurrent creations of the same email.

        Args:
            account: Account with hashed password

        Raises:
            PersistenceError: On duplicate id/email or storage failure
        """
        ...

    def get_all(self) -> list[Account]:
        """Return every stored account in insertion order."""
        ...
