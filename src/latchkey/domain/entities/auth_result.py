"""Tagged outcomes of authentication operations.

Orchestrator operations return either :class:`AuthSuccess` or
:class:`AuthFailure` instead of raising, so callers handle every error kind
explicitly.
"""

from dataclasses import dataclass
from typing import Union

from latchkey.domain.entities.account import SanitizedAccount
from latchkey.domain.exceptions import AuthError


@dataclass(frozen=True)
class AuthSuccess:
    """Successful outcome.

    Attributes:
        account: Sanitized account the operation acted on.
        token: Issued session token, if the operation issues one.
    """

    account: SanitizedAccount
    token: str | None = None

    ok = True


@dataclass(frozen=True)
class AuthFailure:
    """Failed outcome wrapping one error from the taxonomy."""

    error: AuthError

    ok = False

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


AuthResult = Union[AuthSuccess, AuthFailure]
