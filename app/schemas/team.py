#app/schemas/team.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

class TeamBase(BaseModel):
    """
    TeamBase — base team schema.
    """
    name: str = Field(..., min_length=1, examples=["Platform"], description="Team name")
    description: Optional[str] = Field(None, examples=["Infrastructure and tooling"], description="Description")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if v is not None and not v.strip():
            raise ValueError("name must not be blank")
        return v.strip() if v is not None else v

class TeamCreate(TeamBase):
    """
    TeamCreate — create a team.
    """
    pass

class TeamUpdate(BaseModel):
    """
    TeamUpdate — partial update; only fields sent are applied.
    """
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v):
        if v is None or not v.strip():
            raise ValueError("name must not be null or blank")
        return v.strip()

class TeamRead(TeamBase):
    """
    TeamRead — team as returned by the API.
    """
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
