"""JWT session token service.

Issues and verifies the signed, time-bounded session tokens handed out at
registration and sign-in. Tokens are stateless: nothing is stored
server-side and an issued token stays valid until it expires.
"""

from datetime import datetime, timedelta, timezone

import jwt

from latchkey.core.config import Settings
from latchkey.domain.entities import Role, TokenClaims
from latchkey.domain.exceptions import ConfigurationError, TokenExpiredError, TokenInvalidError


class JWTService:
    """Service for creating and validating session tokens."""

    ALGORITHM = "HS256"
    ISSUER = "latchkey"
    REQUIRED_CLAIMS = ["sub", "role", "iat", "exp", "iss"]

    def __init__(self, secret_key: str | None, lifetime: timedelta) -> None:
        """Initialize the JWT service.

        Args:
            secret_key: Secret key for signing tokens.
            lifetime: How long an issued token stays valid.

        Raises:
            ConfigurationError: If the secret key is missing or empty.
        """
        if not secret_key:
            raise ConfigurationError("A signing secret is required to issue session tokens")
        if lifetime <= timedelta(0):
            raise ConfigurationError("Session token lifetime must be positive")
        self._secret_key = secret_key
        self._lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTService":
        """Build the service from application settings."""
        return cls(
            secret_key=settings.require_secret(),
            lifetime=timedelta(seconds=settings.token_lifetime_seconds),
        )

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    @property
    def expires_in(self) -> int:
        """Token lifetime in whole seconds."""
        return int(self._lifetime.total_seconds())

    def issue(
        self,
        subject_id: int,
        role: Role | str,
        issued_at: datetime | None = None,
    ) -> str:
        """Create a session token.

        Args:
            subject_id: Id of the account the token identifies.
            role: The account's role.
            issued_at: Issuance time. Defaults to now (UTC).

        Returns:
            Encoded JWT.
        """
        now = issued_at or datetime.now(timezone.utc)
        payload = {
            "iss": self.ISSUER,
            "sub": str(subject_id),
            "role": Role(role).value,
            "iat": now,
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a session token.

        Args:
            token: The encoded JWT.

        Returns:
            The verified claims.

        Raises:
            TokenExpiredError: If the token has expired.
            TokenInvalidError: If the token is malformed, forged or
                missing claims.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self.ISSUER,
                options={"require": self.REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except jwt.InvalidTokenError as e:
            raise TokenInvalidError() from e

        try:
            return TokenClaims(
                subject_id=int(payload["sub"]),
                role=Role(payload["role"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (TypeError, ValueError) as e:
            raise TokenInvalidError() from e
