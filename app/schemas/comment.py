#app/schemas/comment.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

class CommentCreate(BaseModel):
    """
    CommentCreate — add a comment to a task. Without user_id the comment counts as automated.
    """
    content: str = Field(..., min_length=1, examples=["Blocked on review"], description="Text")
    user_id: Optional[str] = Field(None, description="ID of the author")
    is_automated: Optional[bool] = Field(None, description="Posted by an automated process")

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v):
        if not v.strip():
            raise ValueError("content must not be blank")
        return v

class CommentRead(BaseModel):
    """
    CommentRead — comment as returned by the API.
    """
    id: str
    task_id: str
    user_id: Optional[str] = None
    content: str
    is_automated: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
