"""
Create-account use case.

Validation order is part of the contract, because it decides which
error a caller sees when several conditions fail at once:

    1. password == confirm_password     else PasswordMismatchError
    2. password passes strength policy  else InvalidPasswordError
    3. hash password
    4. email is not registered          else EmailAlreadyTakenError
    5. generate identifier
    6. build Account
    7. save (PersistenceError propagates unchanged)

Persistence is the last step, so a failure or cancellation anywhere
earlier leaves the repository untouched. Uniqueness here is a
check-then-act; atomicity under concurrent requests belongs to the
repository.
"""

import logging
from dataclasses import dataclass

from .account import Account, CreateAccountRequest
from .exceptions import EmailAlreadyTakenError, InvalidPasswordError, PasswordMismatchError
from .ports import AccountRepository, IdGenerator, PasswordService

logger = logging.getLogger(__name__)


@dataclass
class CreateAccountService:
    """
    Domain service for account creation.

    Collaborators are injected; the service never builds concrete
    implementations itself.
    """

    password_service: PasswordService
    repository: AccountRepository
    id_generator: IdGenerator

    def create_account(self, request: CreateAccountRequest) -> Account:
        """
        Create and persist a new account.

        Args:
            request: Email plus password and its confirmation

        Returns:
            The persisted account (password holds the hash)

        Raises:
            PasswordMismatchError: If password and confirmation differ
            InvalidPasswordError: If the password fails the strength policy
            EmailAlreadyTakenError: If the email is already registered
            PersistenceError: If the repository refuses or fails the insert
        """
        if request.password != request.confirm_password:
            logger.info("Account creation rejected for %s: password mismatch", request.email)
            raise PasswordMismatchError("Password and confirmation do not match")

        if not self.password_service.validate(request.password):
            logger.info("Account creation rejected for %s: weak password", request.email)
            raise InvalidPasswordError("Password does not meet the strength policy")

        hashed_password = self.password_service.hash(request.password)

        if self.repository.find_by_email(request.email) is not None:
            logger.info("Account creation rejected for %s: email taken", request.email)
            raise EmailAlreadyTakenError(str(request.email))

        account = Account(
            id=self.id_generator.generate(),
            email=request.email,
            password=hashed_password,
        )
        self.repository.save(account)

        logger.info("Account created: id=%s email=%s", account.id, account.email)
        return account


def create_account(
    request: CreateAccountRequest,
    *,
    password_service: PasswordService,
    repository: AccountRepository,
    id_generator: IdGenerator,
) -> Account:
    """Run a single create-account invocation with the given collaborators."""
    service = CreateAccountService(
        password_service=password_service,
        repository=repository,
        id_generator=id_generator,
    )
    return service.create_account(request)
