"""
Account entity and create-account request.

Accounts hold the password hash only. Credential fields are excluded
from repr so they never end up in logs or tracebacks.
"""

from dataclasses import dataclass, field

from .email import Email


@dataclass(frozen=True)
class Account:
    """Registered account. Identifier and email never change after creation."""

    id: str
    email: Email
    password: str = field(repr=False)


@dataclass(frozen=True)
class CreateAccountRequest:
    """Input of a single create-account invocation. Never persisted."""

    email: Email
    password: str = field(repr=False)
    confirm_password: str = field(repr=False)
