"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from functools import lru_cache

from fastapi import Depends, Request

from src.adapters.ids.uuid_generator import UuidIdGenerator
from src.adapters.password.bcrypt_service import BcryptPasswordService
from src.config.settings import Settings, get_settings
from src.domain.create_account import CreateAccountService
from src.domain.ports import AccountRepository

# Module-level singleton - UuidIdGenerator is stateless
_id_generator = UuidIdGenerator()


def get_repository(request: Request) -> AccountRepository:
    """
    Get the account repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


@lru_cache
def _build_password_service(min_length: int, cost: int, require_mixed: bool) -> BcryptPasswordService:
    return BcryptPasswordService(min_length=min_length, cost=cost, require_mixed=require_mixed)


def get_password_service(settings: Settings = Depends(get_settings)) -> BcryptPasswordService:
    """Get bcrypt password service configured from settings."""
    return _build_password_service(
        settings.password_min_length,
        settings.bcrypt_cost,
        settings.password_require_mixed,
    )


def get_id_generator() -> UuidIdGenerator:
    """Get UUID identifier generator (singleton)."""
    return _id_generator


def get_create_account_service(
    repository: AccountRepository = Depends(get_repository),
    password_service: BcryptPasswordService = Depends(get_password_service),
    id_generator: UuidIdGenerator = Depends(get_id_generator),
) -> CreateAccountService:
    """
    Create account service with injected dependencies.

    Wires together the password service, repository and id generator.
    """
    return CreateAccountService(
        password_service=password_service,
        repository=repository,
        id_generator=id_generator,
    )
