"""SQLAlchemy model for the accounts table.

Accounts are uniquely identified by email; the unique constraint is the
authority on duplicates.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from latchkey.domain.entities import Account, Role
from latchkey.infrastructure.persistence.database import Base


class AccountModel(Base):
    """SQLAlchemy model for the accounts table.

    Attributes:
        id: Primary key (autoincrement).
        name: Display name.
        email: Email address (unique).
        password_hash: Argon2 password hash.
        role: Role name ('user' or 'admin').
        created_at: Timestamp when the account was created.
        updated_at: Timestamp when the account was last updated.
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Account ID",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Account email address",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Hashed password (argon2)",
    )
    role: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=Role.USER.value,
        server_default=Role.USER.value,
        comment="Account role: user or admin",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (UniqueConstraint("email", name="uq_accounts_email"),)

    def to_entity(self) -> Account:
        """Convert the row to a domain entity."""
        return Account(
            id=self.id,
            name=self.name,
            email=self.email,
            password_hash=self.password_hash,
            role=Role(self.role),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email}, role={self.role})>"
