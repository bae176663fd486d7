"""
User Provisioning Service

Populates the repository with the starter accounts served on first boot.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional
from techhive.modules.users.domain.user import User, utc_now
from techhive.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("techhive.users.provisioning")


class UserProvisioningService:
    """Service for seeding initial users."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def seed_users(self, now: Optional[datetime] = None) -> List[User]:
        """
        Insert the two starter users, timestamped relative to ``now``.

        Skipped when the repository already holds users, so a reused
        repository is never seeded twice.
        """
        if self.repository.count():
            logger.debug("[UserProvisioningService.seed_users] Repository not empty, skipping")
            return []

        now = now or utc_now()
        seeded = [
            self.repository.insert(User(
                first_name="Aarav",
                last_name="Sharma",
                email="aarav.sharma@techhive.local",
                department="IT",
                title="System Admin",
                is_active=True,
                created_at_utc=now - timedelta(days=10),
                updated_at_utc=now - timedelta(days=2),
            )),
            self.repository.insert(User(
                first_name="Diya",
                last_name="Mehta",
                email="diya.mehta@techhive.local",
                department="HR",
                title="HR Specialist",
                is_active=True,
                created_at_utc=now - timedelta(days=8),
                updated_at_utc=now - timedelta(days=1),
            )),
        ]
        logger.info(f"[UserProvisioningService.seed_users] Seeded {len(seeded)} users")
        return seeded
