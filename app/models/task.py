#app/models/task.py
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field

from app.models.base import MutableEntity


class TaskStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    BLOCKED = "blocked"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"

    @property
    def rank(self) -> int:
        """Urgency rank: P1=1 is the most urgent."""
        return int(self.value[1:])


class Task(MutableEntity):
    """
    Task — unit of work owned by a team. created_by_id is fixed at creation.
    """
    title: str = Field(..., min_length=1, description="Title")
    description: Optional[str] = Field(None, description="Description")
    team_id: str = Field(..., description="ID of the owning team")
    assignee_id: Optional[str] = Field(None, description="ID of the assigned user")
    created_by_id: str = Field(..., description="ID of the creating user")
    status: TaskStatus = Field(TaskStatus.NOT_STARTED, description="not_started, in_progress, blocked, completed")
    priority: TaskPriority = Field(TaskPriority.P3, description="P1 (most urgent) to P3")
    due_date: Optional[date] = Field(None, description="Due date")

    def __repr__(self):
        return (
            f"<Task(id={self.id}, title='{self.title}', status={self.status.value}, "
            f"team_id={self.team_id}, priority={self.priority.value}, "
            f"assignee_id={self.assignee_id})>"
        )
