"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from src.domain.account import Account


class CreateAccountBody(BaseModel):
    """Request model for account creation."""

    email: str = Field(..., min_length=1, max_length=320, description="Email address to register")
    password: str = Field(..., min_length=1, description="Account password")
    confirm_password: str = Field(..., min_length=1, description="Must equal password")


class AccountResponse(BaseModel):
    """Public view of an account. The password hash is never exposed."""

    id: str
    email: str

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(id=account.id, email=str(account.email))


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
