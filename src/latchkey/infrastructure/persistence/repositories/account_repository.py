"""Account repository for database operations.

The repository is the only code that reads or writes the ``accounts`` table.
It returns domain :class:`Account` entities and translates store failures
into the authentication error taxonomy.
"""

import asyncio
from typing import Awaitable, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from latchkey.core.logging import get_logger
from latchkey.domain.entities import Account, Role
from latchkey.domain.exceptions import DuplicateEmailError, StorageUnavailableError
from latchkey.infrastructure.persistence.models import AccountModel

logger = get_logger(__name__)

T = TypeVar("T")


class AccountRepository:
    """Repository for account database operations."""

    def __init__(self, session: AsyncSession, timeout: float | None = None) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
            timeout: Upper bound in seconds for each store call.
        """
        self.session = session
        self.timeout = timeout

    async def _bounded(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning("Account store timed out", operation=operation, timeout=self.timeout)
            raise StorageUnavailableError() from e

    async def find_by_email(self, email: str) -> Account | None:
        """Get an account by email.

        Args:
            email: Email address, matched exactly.

        Returns:
            Account if found, None otherwise.

        Raises:
            StorageUnavailableError: If the store cannot be queried.
        """
        try:
            result = await self._bounded(
                "find_by_email",
                self.session.execute(select(AccountModel).where(AccountModel.email == email)),
            )
        except SQLAlchemyError as e:
            logger.error("Account lookup failed", operation="find_by_email", error_type=type(e).__name__)
            raise StorageUnavailableError() from e
        model = result.scalar_one_or_none()
        return model.to_entity() if model is not None else None

    async def find_by_id(self, account_id: int) -> Account | None:
        """Get an account by ID.

        Args:
            account_id: Account ID.

        Returns:
            Account if found, None otherwise.
        """
        try:
            model = await self._bounded(
                "find_by_id", self.session.get(AccountModel, account_id)
            )
        except SQLAlchemyError as e:
            logger.error("Account lookup failed", operation="find_by_id", error_type=type(e).__name__)
            raise StorageUnavailableError() from e
        return model.to_entity() if model is not None else None

    async def email_exists(self, email: str) -> bool:
        """Check if an email is already registered.

        Advisory only: a concurrent insert can still win, which
        :meth:`insert` reports as :class:`DuplicateEmailError`.
        """
        try:
            result = await self._bounded(
                "email_exists",
                self.session.execute(
                    select(AccountModel.id).where(AccountModel.email == email).limit(1)
                ),
            )
        except SQLAlchemyError as e:
            logger.error("Account lookup failed", operation="email_exists", error_type=type(e).__name__)
            raise StorageUnavailableError() from e
        return result.scalar_one_or_none() is not None

    async def insert(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.USER,
    ) -> Account:
        """Create and commit a new account.

        The insert either commits completely or is rolled back.

        Args:
            name: Display name.
            email: Email address.
            password_hash: Argon2 password hash.
            role: Account role.

        Returns:
            The persisted account with its store-assigned id and timestamps.

        Raises:
            DuplicateEmailError: If the email is already registered.
            StorageUnavailableError: If the store fails or times out.
        """
        account = AccountModel(
            name=name,
            email=email,
            password_hash=password_hash,
            role=Role(role).value,
        )
        try:
            self.session.add(account)
            await self._bounded("insert", self.session.flush())
            await self._bounded("insert", self.session.commit())
            await self._bounded("insert", self.session.refresh(account))
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateEmailError() from e
        except StorageUnavailableError:
            await self.session.rollback()
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Account insert failed", operation="insert", error_type=type(e).__name__)
            raise StorageUnavailableError() from e
        return account.to_entity()
