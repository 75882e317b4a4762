"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account-creation workflow: the Email value
object, the Account entity, the ports it depends on, and the use case
that orchestrates them. It defines its own port interfaces so adapters
stay decoupled from the business rules.
"""

from .account import Account, CreateAccountRequest
from .create_account import CreateAccountService, create_account
from .email import Email, EmailNormalization, create_email
from .exceptions import (
    AccountError,
    EmailAlreadyTakenError,
    InvalidEmailError,
    InvalidPasswordError,
    PasswordMismatchError,
    PersistenceError,
)
from .ports import AccountRepository, IdGenerator, PasswordService

__all__ = [
    "Account",
    "AccountError",
    "AccountRepository",
    "CreateAccountRequest",
    "CreateAccountService",
    "Email",
    "EmailAlreadyTakenError",
    "EmailNormalization",
    "IdGenerator",
    "InvalidEmailError",
    "InvalidPasswordError",
    "PasswordMismatchError",
    "PasswordService",
    "PersistenceError",
    "create_account",
    "create_email",
]
