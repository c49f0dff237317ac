#app/schemas/task.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import date, datetime

from app.models.task import TaskPriority, TaskStatus
from app.schemas.comment import CommentRead
from app.schemas.user import UserRead

class TaskBase(BaseModel):
    """
    TaskBase — base task schema (create/read).
    """
    title: str = Field(..., min_length=1, examples=["Wire up the kanban board"], description="Title")
    description: Optional[str] = Field(None, examples=["Columns per status"], description="Description")
    team_id: str = Field(..., description="ID of the owning team")
    assignee_id: Optional[str] = Field(None, description="ID of the assigned user")
    priority: TaskPriority = Field(TaskPriority.P3, description="P1 (most urgent), P2, P3")
    due_date: Optional[date] = Field(None, examples=["2026-12-31"], description="Due date")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v):
        if not v.strip():
            raise ValueError("title must not be blank")
        return v.strip()

class TaskCreate(TaskBase):
    """
    TaskCreate — create a task. Status always starts as not_started.
    created_by_id may instead come from the X-User-Id header.
    """
    created_by_id: Optional[str] = Field(None, description="ID of the creating user")

class TaskUpdate(BaseModel):
    """
    TaskUpdate — partial update. A field sent as null clears it
    (description, assignee_id, due_date); title, status and priority cannot be null.
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    assignee_id: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None

    @field_validator("title", "status", "priority")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} must not be null")
        if info.field_name == "title":
            if not v.strip():
                raise ValueError(f"{info.field_name} must not be blank")
            return v.strip()
        return v

class TaskRead(TaskBase):
    """
    TaskRead — task as returned by the API.
    """
    id: str
    created_by_id: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class TaskDetail(TaskRead):
    """
    TaskDetail — task with its comments (oldest first) and the resolved assignee.
    """
    comments: List[CommentRead] = Field(default_factory=list)
    assignee: Optional[UserRead] = None

class KanbanBoard(BaseModel):
    """
    KanbanBoard — a team's tasks bucketed by status, each bucket in list order.
    """
    not_started: List[TaskRead] = Field(default_factory=list)
    in_progress: List[TaskRead] = Field(default_factory=list)
    blocked: List[TaskRead] = Field(default_factory=list)
    completed: List[TaskRead] = Field(default_factory=list)
