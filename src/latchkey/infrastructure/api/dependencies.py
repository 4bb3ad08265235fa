"""FastAPI dependencies for the authentication routes.

Process-wide components (settings, database manager, hasher, token service,
cookie policy) are created once by the application factory and stored on
``app.state``; these dependencies hand them to request handlers.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from latchkey.core.config import Settings
from latchkey.domain.services import AuthenticationService
from latchkey.infrastructure.auth import CredentialHasher, JWTService, SessionCookiePolicy
from latchkey.infrastructure.persistence.database import DatabaseManager
from latchkey.infrastructure.persistence.repositories import AccountRepository


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db_manager(request: Request) -> DatabaseManager:
    return request.app.state.db_manager


async def get_db_session(
    db: Annotated[DatabaseManager, Depends(get_db_manager)],
) -> AsyncGenerator[AsyncSession, None]:
    """Yield one database session per request."""
    async with db.session() as session:
        yield session


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_credential_hasher(request: Request) -> CredentialHasher:
    return request.app.state.credential_hasher


def get_cookie_policy(request: Request) -> SessionCookiePolicy:
    return request.app.state.cookie_policy


async def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    hasher: Annotated[CredentialHasher, Depends(get_credential_hasher)],
    tokens: Annotated[JWTService, Depends(get_jwt_service)],
) -> AuthenticationService:
    """Build an authentication service bound to the request's session."""
    accounts = AccountRepository(session, timeout=settings.db_operation_timeout)
    return AuthenticationService(accounts=accounts, hasher=hasher, tokens=tokens)


def get_session_token(
    request: Request,
    policy: Annotated[SessionCookiePolicy, Depends(get_cookie_policy)],
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """Extract the session token from the cookie or a Bearer header.

    The cookie wins when both are present.

    Returns:
        The raw token, or None if the request carries none.
    """
    token = request.cookies.get(policy.cookie_name)
    if token:
        return token

    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return None
