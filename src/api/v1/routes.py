"""
API v1 routes.

Defines REST endpoints for account creation and listing.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_create_account_service, get_repository
from src.api.models import AccountResponse, CreateAccountBody, ErrorResponse
from src.config.settings import Settings, get_settings
from src.domain.account import CreateAccountRequest
from src.domain.create_account import CreateAccountService
from src.domain.email import create_email
from src.domain.exceptions import (
    EmailAlreadyTakenError,
    InvalidEmailError,
    InvalidPasswordError,
    PasswordMismatchError,
    PersistenceError,
)
from src.domain.ports import AccountRepository

router = APIRouter(tags=["v1"])


@router.post(
    "/accounts",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid email, weak or mismatched password"},
        409: {"model": ErrorResponse, "description": "Email already taken"},
        422: {"description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Account could not be stored"},
    },
    summary="Create a new account",
    description="Submit an email, a password and its confirmation to create an account.",
)
def create_account(
    body: CreateAccountBody,
    service: CreateAccountService = Depends(get_create_account_service),
    settings: Settings = Depends(get_settings),
) -> AccountResponse:
    """
    Create a new account.

    - **email**: Email address to register
    - **password**: Password satisfying the strength policy
    - **confirm_password**: Must equal password
    """
    try:
        email = create_email(body.email, settings.email_normalization)
        account = service.create_account(
            CreateAccountRequest(
                email=email,
                password=body.password,
                confirm_password=body.confirm_password,
            )
        )
    except InvalidEmailError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email address"
        ) from None
    except PasswordMismatchError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Passwords do not match"
        ) from None
    except InvalidPasswordError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Password is too weak"
        ) from None
    except EmailAlreadyTakenError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Email already taken"
        ) from None
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Account could not be created",
        ) from None

    return AccountResponse.from_account(account)


@router.get(
    "/accounts",
    response_model=list[AccountResponse],
    summary="List accounts",
    description="Return every registered account in insertion order.",
)
def list_accounts(
    repository: AccountRepository = Depends(get_repository),
) -> list[AccountResponse]:
    """List all accounts without their password hashes."""
    try:
        accounts = repository.get_all()
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Accounts could not be listed",
        ) from None
    return [AccountResponse.from_account(account) for account in accounts]
