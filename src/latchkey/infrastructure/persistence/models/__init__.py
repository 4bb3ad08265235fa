"""SQLAlchemy models for Latchkey.

All models inherit from the Base class defined in database.py.
"""

from latchkey.infrastructure.persistence.models.account import AccountModel

__all__ = ["AccountModel"]
