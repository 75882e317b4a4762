"""Password adapters - Strength policy and hashing."""

from .bcrypt_service import BcryptPasswordService

__all__ = ["BcryptPasswordService"]
