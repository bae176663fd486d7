"""
User Repository

In-memory, thread-safe holder of all user records.
"""
import logging
import threading
from typing import Callable, Dict, List, Optional
from techhive.modules.users.domain.user import User, utc_now
from techhive.modules.users.exceptions import UserConflictError, UserNotFoundError

logger = logging.getLogger("techhive.users.repository")


class UserRepository:
    """Repository for user data access.

    Owns every stored ``User``; callers only ever receive copies. IDs come
    from a counter that only increments, so an ID is never handed out twice,
    even after the user holding it is deleted.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._users: Dict[int, User] = {}
        self._last_id = 0

    def next_id(self) -> int:
        """Reserve the next user ID."""
        with self._lock:
            self._last_id += 1
            return self._last_id

    def insert(self, user: User) -> User:
        """Assign the next ID to ``user``, store it and return a copy."""
        with self._lock:
            user_id = self.next_id()
            if user_id in self._users:
                raise UserConflictError(user_id)
            stored = user.copy()
            stored.id = user_id
            self._users[user_id] = stored
            logger.debug(f"[UserRepository.insert] user_id={user_id}")
            return stored.copy()

    def get(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        with self._lock:
            user = self._users.get(user_id)
            return user.copy() if user else None

    def exists(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._users

    def list(self) -> List[User]:
        """All users, ascending by ID."""
        with self._lock:
            return [self._users[user_id].copy() for user_id in sorted(self._users)]

    def update(self, user_id: int, mutator: Callable[[User], None]) -> User:
        """Apply ``mutator`` to the stored user and stamp ``updated_at_utc``."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            mutator(user)
            user.updated_at_utc = utc_now()
            logger.debug(f"[UserRepository.update] user_id={user_id}")
            return user.copy()

    def delete(self, user_id: int) -> None:
        """Remove user; the ID stays retired."""
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)
            logger.debug(f"[UserRepository.delete] user_id={user_id}")

    def count(self) -> int:
        with self._lock:
            return len(self._users)
