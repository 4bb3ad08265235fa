"""Domain services for Latchkey.

Services contain business logic that doesn't naturally fit within a single
entity. They depend on collaborators through protocols, not concrete
infrastructure classes.
"""

from latchkey.domain.services.authentication_service import (
    AccountDirectory,
    AuthenticationService,
)

__all__ = [
    "AccountDirectory",
    "AuthenticationService",
]
