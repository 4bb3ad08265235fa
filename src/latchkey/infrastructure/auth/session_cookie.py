"""Cookie policy for carrying session tokens.

The cookie lifetime is derived from the same ``token_lifetime_seconds``
setting as the token expiry so the two cannot drift apart.
"""

from typing import Any

from starlette.responses import Response

from latchkey.core.config import Settings


class SessionCookiePolicy:
    """Decides the attributes of the session cookie."""

    def __init__(self, settings: Settings) -> None:
        self.cookie_name = settings.cookie_name
        self._secure = settings.is_production
        self._max_age = settings.token_lifetime_seconds

    def _security_options(self) -> dict[str, Any]:
        return {
            "httponly": True,
            "samesite": "strict",
            "secure": self._secure,
            "path": "/",
        }

    def attach_options(self) -> dict[str, Any]:
        """Cookie attributes for a freshly issued token."""
        return {**self._security_options(), "max_age": self._max_age}

    def clear_options(self) -> dict[str, Any]:
        """Cookie attributes that make the client drop the session."""
        return {**self._security_options(), "max_age": 0, "expires": 0}

    def attach(self, response: Response, token: str) -> None:
        """Set the session cookie on a response."""
        response.set_cookie(key=self.cookie_name, value=token, **self.attach_options())

    def clear(self, response: Response) -> None:
        """Expire the session cookie on a response.

        Clearing does not invalidate the token itself; a copy presented
        elsewhere stays valid until it expires.
        """
        response.set_cookie(key=self.cookie_name, value="", **self.clear_options())
