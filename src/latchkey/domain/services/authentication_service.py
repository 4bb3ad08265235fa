"""Registration, sign-in and sign-out.

The service composes the account repository, the credential hasher and the
token service. Each call is an independent unit of work. Recoverable errors
are returned as :class:`AuthFailure` values; only a programming error or a
:class:`ConfigurationError` escapes as an exception.

Registration:
1. Advisory uniqueness check
2. Hash password (off the event loop)
3. Insert account (the store's unique constraint decides duplicates)
4. Issue session token

Sign-in:
1. Look up account by email
2. Verify password (a dummy hash is verified for unknown emails)
3. Issue session token
"""

import asyncio
from typing import Protocol

from latchkey.core.logging import get_logger
from latchkey.domain.entities import (
    Account,
    AuthFailure,
    AuthResult,
    AuthSuccess,
    Role,
    TokenClaims,
)
from latchkey.domain.exceptions import (
    AuthError,
    DuplicateEmailError,
    InvalidPasswordError,
    UserNotFoundError,
)

logger = get_logger(__name__)


class AccountDirectory(Protocol):
    """Account store operations the service relies on."""

    async def find_by_email(self, email: str) -> Account | None: ...

    async def find_by_id(self, account_id: int) -> Account | None: ...

    async def email_exists(self, email: str) -> bool: ...

    async def insert(
        self, name: str, email: str, password_hash: str, role: Role = Role.USER
    ) -> Account: ...


class PasswordHashing(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password: str, hashed: str) -> bool: ...

    def verify_dummy(self, password: str) -> None: ...


class TokenIssuing(Protocol):
    def issue(self, subject_id: int, role: Role | str) -> str: ...

    def verify(self, token: str) -> TokenClaims: ...


class AuthenticationService:
    """Orchestrates the account credential lifecycle."""

    def __init__(
        self,
        accounts: AccountDirectory,
        hasher: PasswordHashing,
        tokens: TokenIssuing,
    ) -> None:
        self.accounts = accounts
        self.hasher = hasher
        self.tokens = tokens

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: Role = Role.USER,
    ) -> AuthResult:
        """Register a new account and issue its first session token.

        Args:
            name: Display name.
            email: Email address, unique across accounts.
            password: Plaintext password.
            role: Account role.

        Returns:
            AuthSuccess with the sanitized account and token, or AuthFailure
            carrying DuplicateEmailError, HashingFailureError or
            StorageUnavailableError.
        """
        try:
            if await self.accounts.email_exists(email):
                raise DuplicateEmailError()

            password_hash = await asyncio.to_thread(self.hasher.hash, password)
            account = await self.accounts.insert(
                name=name,
                email=email,
                password_hash=password_hash,
                role=role,
            )
        except DuplicateEmailError as e:
            logger.info("Registration failed", email=email, error_code=e.code)
            return AuthFailure(e)
        except AuthError as e:
            logger.error("Registration failed", email=email, error_code=e.code)
            return AuthFailure(e)

        token = self.tokens.issue(account.id, account.role)
        logger.info("Account registered", account_id=account.id, role=account.role.value)
        return AuthSuccess(account=account.sanitized(), token=token)

    async def authenticate(self, email: str, password: str) -> AuthResult:
        """Verify credentials and issue a session token.

        UserNotFoundError and InvalidPasswordError stay distinct in the result
        so callers can log them; callers should present both the same way.

        Args:
            email: Email address.
            password: Plaintext password.

        Returns:
            AuthSuccess with the sanitized account and token, or AuthFailure
            carrying UserNotFoundError, InvalidPasswordError,
            HashingFailureError or StorageUnavailableError.
        """
        try:
            account = await self.accounts.find_by_email(email)
            if account is None:
                await asyncio.to_thread(self.hasher.verify_dummy, password)
                raise UserNotFoundError()

            matches = await asyncio.to_thread(
                self.hasher.verify, password, account.password_hash
            )
            if not matches:
                raise InvalidPasswordError()
        except (UserNotFoundError, InvalidPasswordError) as e:
            logger.info("Sign-in failed", email=email, error_code=e.code)
            return AuthFailure(e)
        except AuthError as e:
            logger.error("Sign-in failed", email=email, error_code=e.code)
            return AuthFailure(e)

        token = self.tokens.issue(account.id, account.role)
        logger.info("Account signed in", account_id=account.id)
        return AuthSuccess(account=account.sanitized(), token=token)

    async def resolve_session(self, token: str) -> AuthResult:
        """Load the account a session token was issued to.

        Returns:
            AuthSuccess without a token, or AuthFailure carrying
            TokenExpiredError, TokenInvalidError, UserNotFoundError or
            StorageUnavailableError.
        """
        try:
            claims = self.tokens.verify(token)
            account = await self.accounts.find_by_id(claims.subject_id)
            if account is None:
                raise UserNotFoundError()
        except AuthError as e:
            logger.info("Session rejected", error_code=e.code)
            return AuthFailure(e)
        return AuthSuccess(account=account.sanitized())

    @staticmethod
    def terminate_session() -> None:
        """End the caller's session.

        Sessions are stateless, so there is nothing to release server-side
        and no store is touched; the transport layer drops the cookie. Always
        succeeds.
        """
        logger.info("Session terminated")
