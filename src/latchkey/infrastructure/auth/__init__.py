"""Authentication infrastructure components.

This module provides password hashing, session token signing and the
session cookie policy.
"""

from latchkey.infrastructure.auth.jwt_service import JWTService
from latchkey.infrastructure.auth.password_hasher import CredentialHasher
from latchkey.infrastructure.auth.session_cookie import SessionCookiePolicy

__all__ = [
    "CredentialHasher",
    "JWTService",
    "SessionCookiePolicy",
]
