"""
Data Access Layer (Repositories)

Repositories own the stored user records.
"""

from .user_repository import UserRepository

__all__ = [
    "UserRepository",
]
