"""
Email value object - Validated, normalized email addresses.

An Email can only be obtained through validation: the constructor rejects
malformed input with InvalidEmailError, so a "partially valid" instance
never exists. Equality and hashing are by normalized value.
"""

from dataclasses import dataclass, field
from enum import Enum

from email_validator import EmailNotValidError, validate_email

from .exceptions import InvalidEmailError


class EmailNormalization(str, Enum):
    """
    Normalization policy applied before comparing or storing emails.

    - LOWERCASE: strip + lowercase the whole address
    - PRESERVE_LOCAL_PART: strip + lowercase the domain only
    """

    LOWERCASE = "lowercase"
    PRESERVE_LOCAL_PART = "preserve_local_part"


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str
    normalization: EmailNormalization = field(
        default=EmailNormalization.LOWERCASE, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidEmailError(f"Email must be a string, got {type(self.value).__name__}")

        stripped = self.value.strip()
        if not stripped:
            raise InvalidEmailError("Email cannot be empty")

        try:
            validated = validate_email(stripped, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidEmailError(f"Invalid email: {e}") from e

        # email-validator lowercases the domain and keeps the local part as typed
        normalized = validated.normalized
        if EmailNormalization(self.normalization) is EmailNormalization.LOWERCASE:
            normalized = normalized.lower()

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


def create_email(
    raw: str, normalization: EmailNormalization = EmailNormalization.LOWERCASE
) -> Email:
    """
    Parse and normalize a raw string into an Email.

    Args:
        raw: User-supplied email address
        normalization: Policy deciding which parts are case-insensitive

    Returns:
        Validated Email

    Raises:
        InvalidEmailError: If the address is empty or malformed
    """
    return Email(raw, normalization=normalization)
