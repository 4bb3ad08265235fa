"""Latchkey - account registration and session authentication service.

Registers accounts with unique emails, stores Argon2 password hashes,
verifies credentials at sign-in and hands out signed session tokens in
secure cookies.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
