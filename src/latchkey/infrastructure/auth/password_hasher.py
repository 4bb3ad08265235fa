"""Password hashing using Argon2.

Provides salted password hashing and verification using the Argon2id
algorithm. The work factor comes from settings so it can be raised without
a code change; hashes produced with older parameters keep verifying and are
reported by :meth:`CredentialHasher.needs_rehash`.
"""

import secrets

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError, VerifyMismatchError

from latchkey.core.config import Settings
from latchkey.domain.exceptions import HashingFailureError


class CredentialHasher:
    """Hashes and verifies account passwords."""

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ) -> None:
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )
        # Matches no password and carries the configured cost
        self._dummy_hash = self._hasher.hash(secrets.token_urlsafe(32))

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialHasher":
        """Build a hasher with the configured work factor."""
        return cls(
            time_cost=settings.hash_time_cost,
            memory_cost=settings.hash_memory_cost,
            parallelism=settings.hash_parallelism,
        )

    def hash(self, password: str) -> str:
        """Hash a password using Argon2id.

        Args:
            password: The plaintext password to hash.

        Returns:
            The hashed password string.

        Raises:
            HashingFailureError: If the password cannot be hashed.

        Example:
            >>> hashed = CredentialHasher().hash("SecureP@ss123!")
            >>> hashed.startswith("$argon2id$")
            True
        """
        if not isinstance(password, (str, bytes)):
            raise HashingFailureError("Password must be text")
        try:
            return self._hasher.hash(password)
        except (HashingError, TypeError, UnicodeError) as e:
            raise HashingFailureError() from e

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash.

        Uses argon2's own constant-time verification.

        Args:
            password: The plaintext password to verify.
            hashed: The stored hash to verify against.

        Returns:
            True if the password matches, False otherwise.

        Raises:
            HashingFailureError: If ``hashed`` is not a valid Argon2 hash.
        """
        if not isinstance(hashed, (str, bytes)):
            raise HashingFailureError("Stored password hash is malformed")
        try:
            return self._hasher.verify(hashed, password)
        except VerifyMismatchError:
            return False
        except InvalidHashError as e:
            raise HashingFailureError("Stored password hash is malformed") from e
        except (VerificationError, TypeError, UnicodeError) as e:
            raise HashingFailureError() from e

    @property
    def dummy_hash(self) -> str:
        return self._dummy_hash

    def verify_dummy(self, password: str) -> None:
        """Spend one verification on a hash that never belongs to an account."""
        try:
            self._hasher.verify(self._dummy_hash, password)
        except (VerificationError, InvalidHashError, TypeError, UnicodeError):
            pass

    def needs_rehash(self, hashed: str) -> bool:
        """Check if a password hash was produced with outdated parameters.

        Sign-in does not call this. It is for maintenance jobs that upgrade
        stored hashes after the configured work factor is raised.

        Args:
            hashed: The hashed password to check.

        Returns:
            True if the hash should be updated, False otherwise.
        """
        try:
            return self._hasher.check_needs_rehash(hashed)
        except InvalidHashError as e:
            raise HashingFailureError("Stored password hash is malformed") from e
