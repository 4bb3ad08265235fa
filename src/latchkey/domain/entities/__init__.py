"""Domain entities for Latchkey.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from latchkey.domain.entities.account import Account, Role, SanitizedAccount
from latchkey.domain.entities.auth_result import AuthFailure, AuthResult, AuthSuccess
from latchkey.domain.entities.token_claims import TokenClaims

__all__ = [
    "Account",
    "AuthFailure",
    "AuthResult",
    "AuthSuccess",
    "Role",
    "SanitizedAccount",
    "TokenClaims",
]
