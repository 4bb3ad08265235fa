"""Claims carried by a session token."""

from dataclasses import dataclass
from datetime import datetime

from latchkey.domain.entities.account import Role


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a session token.

    Attributes:
        subject_id: Id of the account the token was issued to.
        role: Role of the account at issuance time.
        issued_at: When the token was issued (UTC).
        expires_at: When the token stops verifying (UTC).
    """

    subject_id: int
    role: Role
    issued_at: datetime
    expires_at: datetime
