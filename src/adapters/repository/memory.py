"""
In-memory repository adapter - Implements AccountRepository protocol.

Process-local storage for development and tests. A single lock
serializes every read and write, and save() re-checks id and email
uniqueness under that lock, so concurrent creations of the same email
cannot both be stored.
"""

import logging
import threading
from collections.abc import Iterable

from src.domain.account import Account
from src.domain.email import Email
from src.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class InMemoryAccountRepository:
    """
    Implements AccountRepository protocol with a dict guarded by a lock.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Insertion order is preserved (dicts are ordered).
    """

    def __init__(self, initial_accounts: Iterable[Account] = ()) -> None:
        """
        Initialize repository, optionally pre-seeded.

        Args:
            initial_accounts: Accounts to store up front

        Raises:
            PersistenceError: If the seed contains a duplicate id or email
        """
        self._lock = threading.Lock()
        self._accounts: dict[str, Account] = {}
        self._ids_by_email: dict[Email, str] = {}
        for account in initial_accounts:
            self.save(account)

    def find_by_email(self, email: Email) -> Account | None:
        with self._lock:
            account_id = self._ids_by_email.get(email)
            return self._accounts.get(account_id) if account_id is not None else None

    def save(self, account: Account) -> None:
        with self._lock:
            if account.id in self._accounts:
                raise PersistenceError(f"Account id already exists: {account.id}")
            if account.email in self._ids_by_email:
                raise PersistenceError(f"Account email already exists: {account.email}")
            self._accounts[account.id] = account
            self._ids_by_email[account.email] = account.id
        logger.debug("Stored account %s", account.id)

    def get_all(self) -> list[Account]:
        with self._lock:
            return list(self._accounts.values())
