#app/models/comment.py
from typing import Optional

from pydantic import Field

from app.models.base import Entity


class Comment(Entity):
    """
    Comment — write-once note on a task. A missing user_id means an automated author.
    """
    task_id: str = Field(..., description="ID of the task")
    user_id: Optional[str] = Field(None, description="ID of the author; None for automated comments")
    content: str = Field(..., min_length=1, description="Text")
    is_automated: bool = Field(False, description="Posted by an automated process")

    def __repr__(self):
        return f"<Comment(id={self.id}, task_id={self.task_id}, is_automated={self.is_automated})>"
