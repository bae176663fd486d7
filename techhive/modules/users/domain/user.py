"""
User Domain Model

Pure data model representing a user entity.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """User domain model."""
    first_name: str
    last_name: str
    email: str
    department: Optional[str] = None
    title: Optional[str] = None
    is_active: bool = True
    id: int = 0
    created_at_utc: datetime = field(default_factory=utc_now)
    updated_at_utc: datetime = field(default_factory=utc_now)

    def copy(self) -> "User":
        """Detached copy, so callers never alias the stored instance."""
        return replace(self)

    def to_dict(self) -> dict:
        """Convert User to its camelCase wire form."""
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "department": self.department,
            "title": self.title,
            "isActive": self.is_active,
            "createdAtUtc": self.created_at_utc.isoformat(),
            "updatedAtUtc": self.updated_at_utc.isoformat(),
        }
