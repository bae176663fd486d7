"""
Business Logic Services

Services contain business logic and orchestrate repository calls.
"""

from .user_service import UserService, apply_update
from .provisioning import UserProvisioningService
from .validation import validate_create, validate_update, is_valid_email

__all__ = [
    "UserService",
    "UserProvisioningService",
    "apply_update",
    "validate_create",
    "validate_update",
    "is_valid_email",
]
