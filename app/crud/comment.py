#app/crud/comment.py
import logging
from typing import List, Optional

from app.database import JsonStore
from app.models.comment import Comment
from app.crud.ordering import oldest_first

logger = logging.getLogger("TeamDashboard.Comments")

def create_comment(
    db: JsonStore,
    task_id: str,
    content: str,
    user_id: Optional[str] = None,
    is_automated: Optional[bool] = None,
) -> Comment:
    """
    Append a comment to a task. Without an author it is treated as automated
    unless is_automated says otherwise.
    """
    if is_automated is None:
        is_automated = user_id is None
    comment = Comment(
        task_id=task_id,
        user_id=user_id,
        content=content,
        is_automated=is_automated,
    )
    db.comments.append(comment)
    db.save()
    logger.info(f"Added {'automated ' if comment.is_automated else ''}comment {comment.id} to task {task_id}")
    return comment

def get_comment(db: JsonStore, comment_id: str) -> Optional[Comment]:
    return next((c for c in db.comments if c.id == comment_id), None)

def get_comments(db: JsonStore, task_id: str) -> List[Comment]:
    """
    Comments of a task, oldest first.
    """
    return oldest_first(c for c in db.comments if c.task_id == task_id)

def get_latest_comment(db: JsonStore, task_id: str) -> Optional[Comment]:
    comments = get_comments(db, task_id)
    return comments[-1] if comments else None

def delete_comment(db: JsonStore, comment_id: str) -> bool:
    comment = get_comment(db, comment_id)
    if comment is None:
        return False
    db.comments.remove(comment)
    db.save()
    logger.info(f"Deleted comment {comment_id}")
    return True
