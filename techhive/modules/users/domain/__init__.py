"""
Domain Models

Pure data models representing user entities and the payloads that change them.
"""

from .user import User, utc_now
from .requests import CreateUserRequest, UpdateUserRequest

__all__ = [
    "User",
    "utc_now",
    "CreateUserRequest",
    "UpdateUserRequest",
]
