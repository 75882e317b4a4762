"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Collaborator doubles (password service, id generator)
- The create-account service wired with those doubles
"""

from collections.abc import Callable, Iterable

import pytest

from src.adapters.repository.memory import InMemoryAccountRepository
from src.domain.account import Account
from src.domain.create_account import CreateAccountService
from src.domain.ports import IdGenerator


class FakePasswordService:
    """PasswordService double with a fixed verdict and a fixed hash."""

    def __init__(self, is_valid: bool, hashed: str) -> None:
        self.is_valid = is_valid
        self.hashed = hashed
        self.validate_calls: list[str] = []
        self.hash_calls: list[str] = []

    def validate(self, plain_password: str) -> bool:
        self.validate_calls.append(plain_password)
        return self.is_valid

    def hash(self, plain_password: str) -> str:
        self.hash_calls.append(plain_password)
        return self.hashed


class FixedIdGenerator:
    """IdGenerator double that always yields the same identifier."""

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        return self.account_id


class SequentialIdGenerator:
    """IdGenerator double yielding id-1, id-2, ..."""

    def __init__(self) -> None:
        self.counter = 0

    def generate(self) -> str:
        self.counter += 1
        return f"id-{self.counter}"


ServiceFactory = Callable[..., CreateAccountService]


@pytest.fixture
def make_service() -> ServiceFactory:
    """
    Factory wiring a CreateAccountService with doubles.

    Keyword arguments:
        is_password_valid: Verdict of the fake password service (default True)
        initial_accounts: Accounts pre-seeded in the in-memory repository
        hashed_password: Hash returned by the fake password service
        id_generator: IdGenerator to use (default: always "id")
    """

    def _make(
        is_password_valid: bool = True,
        initial_accounts: Iterable[Account] = (),
        hashed_password: str = "hashed-password",
        id_generator: IdGenerator | None = None,
    ) -> CreateAccountService:
        return CreateAccountService(
            password_service=FakePasswordService(is_password_valid, hashed_password),
            repository=InMemoryAccountRepository(initial_accounts),
            id_generator=id_generator or FixedIdGenerator("id"),
        )

    return _make


@pytest.fixture
def sequential_ids() -> SequentialIdGenerator:
    """Id generator producing distinct identifiers."""
    return SequentialIdGenerator()
