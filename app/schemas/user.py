#app/schemas/user.py
from pydantic import BaseModel, ConfigDict, Field, EmailStr, field_validator
from typing import Optional
from datetime import datetime

from app.models.user import UserRole

class UserBase(BaseModel):
    """
    UserBase — base user schema (create/read).
    """
    email: EmailStr = Field(..., examples=["alice@example.com"], description="Email")
    name: str = Field(..., min_length=1, examples=["Alice"], description="Display name")
    team_id: Optional[str] = Field(None, description="ID of the team")
    role: UserRole = Field(UserRole.MEMBER, description="admin, member or viewer")

class UserCreate(UserBase):
    """
    UserCreate — create a user. Duplicate emails are accepted.
    """
    pass

class UserUpdate(BaseModel):
    """
    UserUpdate — partial update; team_id may be set to null to leave the team.
    """
    email: Optional[EmailStr] = Field(None, description="Email")
    name: Optional[str] = Field(None, min_length=1, description="Display name")
    team_id: Optional[str] = Field(None, description="ID of the team")
    role: Optional[UserRole] = Field(None, description="Role")

    @field_validator("email", "name", "role")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} must not be null")
        return v

class UserRead(BaseModel):
    """
    UserRead — user as returned by the API.
    """
    id: str
    email: str
    name: str
    team_id: Optional[str] = None
    role: UserRole
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
