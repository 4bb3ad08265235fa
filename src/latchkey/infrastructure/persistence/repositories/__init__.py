"""Repositories for database access."""

from latchkey.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)

__all__ = ["AccountRepository"]
