"""
Domain exceptions - Semantic error types for account creation.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class InvalidEmailError(AccountError):
    """Raw input is not a well-formed email address."""

    pass


class PasswordMismatchError(AccountError):
    """Password and confirmation password differ."""

    pass


class InvalidPasswordError(AccountError):
    """Password does not satisfy the strength policy."""

    pass


class EmailAlreadyTakenError(AccountError):
    """An account with this email already exists."""

    pass


class PersistenceError(AccountError):
    """Storage failed or refused to insert the account."""

    pass
