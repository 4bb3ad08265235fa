"""Error taxonomy for the authentication core.

Every error carries a stable machine-readable ``code`` and a human-readable
``message`` that is safe to show to a client. Internal detail goes in the
exception chain (``raise ... from``) and the logs, never in ``message``.
"""


class AuthError(Exception):
    """Base class for all authentication errors."""

    code = "auth_error"
    default_message = "Authentication error"
    retryable = False

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmailError(AuthError):
    """Raised when an account with the email already exists."""

    code = "duplicate_email"
    default_message = "An account with this email already exists"


class UserNotFoundError(AuthError):
    """Raised when no account matches the email or token subject."""

    code = "user_not_found"
    default_message = "No account matches these credentials"


class InvalidPasswordError(AuthError):
    """Raised when the password does not match the stored hash."""

    code = "invalid_password"
    default_message = "Password does not match"


class HashingFailureError(AuthError):
    """Raised when the password transform fails or a stored hash is malformed."""

    code = "hashing_failure"
    default_message = "Password could not be processed"


class TokenExpiredError(AuthError):
    """Raised when a session token is past its expiry."""

    code = "token_expired"
    default_message = "Session has expired"


class TokenInvalidError(AuthError):
    """Raised when a session token is malformed or its signature is wrong."""

    code = "token_invalid"
    default_message = "Session token is invalid"


class ConfigurationError(AuthError):
    """Raised at startup when required configuration is missing.

    Never recovered from.
    """

    code = "configuration_error"
    default_message = "Service is misconfigured"


class StorageUnavailableError(AuthError):
    """Raised when the account store fails or times out."""

    code = "storage_unavailable"
    default_message = "Account storage is temporarily unavailable"
    retryable = True
