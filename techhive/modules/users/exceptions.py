"""
User Management - Exceptions
"""
from typing import Dict, List


class UserError(Exception):
    """Base exception for user management errors"""
    pass


class UserNotFoundError(UserError):
    """Raised when a user ID is not present in the store"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found.")


class UserConflictError(UserError):
    """Raised when an insert collides with an existing user ID"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} already exists.")


class UserValidationError(UserError):
    """Raised when a create/update request fails field rules"""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__("Validation failed.")
