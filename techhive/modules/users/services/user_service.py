"""
User Service

Business logic for user management operations.
"""
import logging
from typing import List, Optional
from techhive.modules.users.domain.requests import CreateUserRequest, UpdateUserRequest
from techhive.modules.users.domain.user import User, utc_now
from techhive.modules.users.exceptions import UserNotFoundError, UserValidationError
from techhive.modules.users.repositories.user_repository import UserRepository
from techhive.modules.users.services.validation import is_blank, validate_create, validate_update

logger = logging.getLogger("techhive.users.service")


def _trim(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


def apply_update(user: User, request: UpdateUserRequest) -> None:
    """
    Merge an update request into ``user`` in place.

    Names and email only change when the incoming value is non-blank, so a
    blank string cannot clear them. Department and title take any non-null
    value, including "" which clears them.
    """
    if not is_blank(request.first_name):
        user.first_name = request.first_name.strip()

    if not is_blank(request.last_name):
        user.last_name = request.last_name.strip()

    if not is_blank(request.email):
        user.email = request.email.strip()

    if request.department is not None:
        user.department = request.department.strip()

    if request.title is not None:
        user.title = request.title.strip()

    if request.is_active is not None:
        user.is_active = request.is_active


class UserService:
    """Service for user business logic."""

    def __init__(self, repository: Optional[UserRepository] = None):
        self.repository = repository or UserRepository()

    def list_users(self) -> List[User]:
        """List all users sorted by ID."""
        logger.debug("[UserService.list_users]")
        return self.repository.list()

    def get_user(self, user_id: int) -> User:
        """Get user by ID."""
        logger.debug(f"[UserService.get_user] user_id={user_id}")
        user = self.repository.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, request: CreateUserRequest) -> User:
        """Validate and store a new user account."""
        logger.debug(f"[UserService.create_user] email={request.email}")

        errors = validate_create(request)
        if errors:
            raise UserValidationError(errors)

        now = utc_now()
        user = self.repository.insert(User(
            first_name=request.first_name.strip(),
            last_name=request.last_name.strip(),
            email=request.email.strip(),
            department=_trim(request.department),
            title=_trim(request.title),
            is_active=True if request.is_active is None else request.is_active,
            created_at_utc=now,
            updated_at_utc=now,
        ))
        logger.info(f"[UserService.create_user] Created user {user.id}")
        return user

    def update_user(self, user_id: int, request: UpdateUserRequest) -> User:
        """Partially update a user; a missing ID wins over an invalid body."""
        logger.debug(
            f"[UserService.update_user] user_id={user_id}, "
            f"fields={sorted(request.model_dump(exclude_none=True))}"
        )

        if not self.repository.exists(user_id):
            raise UserNotFoundError(user_id)

        errors = validate_update(request)
        if errors:
            raise UserValidationError(errors)

        return self.repository.update(user_id, lambda user: apply_update(user, request))

    def delete_user(self, user_id: int) -> None:
        """Hard delete; the ID is never reissued."""
        logger.debug(f"[UserService.delete_user] user_id={user_id}")
        self.repository.delete(user_id)
        logger.info(f"[UserService.delete_user] Deleted user {user_id}")
