"""Account entity and its outward-facing projection.

Accounts are identified by a store-assigned id and looked up by their
unique email. The password hash stays on :class:`Account`;
:class:`SanitizedAccount` is what leaves the service.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    """Account role."""

    USER = "user"
    ADMIN = "admin"


@dataclass
class Account:
    """Account entity as held by the account store.

    Attributes:
        id: Store-assigned identifier.
        name: Display name.
        email: Unique email address, case-sensitive as stored.
        password_hash: Argon2 hash of the password (never exposed).
        role: Account role.
        created_at: Timestamp when the account was created.
        updated_at: Timestamp when the account was last updated.
    """

    id: int
    name: str
    email: str
    password_hash: str = field(repr=False)
    role: Role = Role.USER
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate account data after initialization."""
        if not self.email:
            raise ValueError("Email is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")
        self.role = Role(self.role)

    def sanitized(self) -> "SanitizedAccount":
        """Project the account without its password hash."""
        return SanitizedAccount(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            created_at=self.created_at,
        )


@dataclass(frozen=True)
class SanitizedAccount:
    """Account view that is safe to return to clients."""

    id: int
    name: str
    email: str
    role: Role
    created_at: datetime | None = None
