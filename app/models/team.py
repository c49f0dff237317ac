#app/models/team.py
from typing import Optional

from pydantic import Field

from app.models.base import MutableEntity


class Team(MutableEntity):
    """
    Team — a group of users that owns tasks. Users and tasks point at it by team_id.
    """
    name: str = Field(..., min_length=1, description="Team name")
    description: Optional[str] = Field(None, description="Description")

    def __repr__(self):
        return f"<Team(id={self.id}, name='{self.name}')>"
