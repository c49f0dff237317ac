#app/models/user.py
from enum import Enum
from typing import Optional

from pydantic import Field

from app.models.base import MutableEntity


class UserRole(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"


class User(MutableEntity):
    """
    User — team member. Belongs to at most one team; email is not required to be unique.
    """
    email: str = Field(..., description="Email")
    name: str = Field(..., min_length=1, description="Display name")
    team_id: Optional[str] = Field(None, description="ID of the team, if any")
    role: UserRole = Field(UserRole.MEMBER, description="admin, member or viewer")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role.value})>"
