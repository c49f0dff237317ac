#app/crud/task.py
import logging
from typing import Any, Dict, List, Optional

from app.database import JsonStore
from app.models.task import Task, TaskPriority, TaskStatus
from app.crud.comment import get_comments
from app.crud.ordering import sort_tasks
from app.crud.user import get_user

logger = logging.getLogger("TeamDashboard.Tasks")

TASK_UPDATE_FIELDS = ("title", "description", "assignee_id", "status", "priority", "due_date")
TASK_FILTERS = ("team_id", "assignee_id", "status", "priority")

def create_task(db: JsonStore, data: dict, created_by_id: str) -> Task:
    """
    Create a new task. Status always starts as not_started and priority
    defaults to P3; the creator is fixed here and never updated.
    """
    task = Task(
        title=data["title"],
        description=data.get("description"),
        team_id=data["team_id"],
        assignee_id=data.get("assignee_id"),
        created_by_id=created_by_id,
        status=TaskStatus.NOT_STARTED,
        priority=data.get("priority") or TaskPriority.P3,
        due_date=data.get("due_date"),
    )
    db.tasks.append(task)
    db.save()
    logger.info(f"Created task {task.id} for team {task.team_id}")
    return task

def get_task(db: JsonStore, task_id: str) -> Optional[Task]:
    return next((t for t in db.tasks if t.id == task_id), None)

def get_task_detail(db: JsonStore, task_id: str) -> Optional[Dict[str, Any]]:
    """
    Task fields plus its comments (oldest first) and the assignee, if it still exists.
    """
    task = get_task(db, task_id)
    if task is None:
        return None
    assignee = get_user(db, task.assignee_id) if task.assignee_id else None
    return {
        **task.model_dump(),
        "comments": [c.model_dump() for c in get_comments(db, task_id)],
        "assignee": assignee.model_dump() if assignee else None,
    }

def _matches(task: Task, filters: dict) -> bool:
    for key in TASK_FILTERS:
        value = filters.get(key)
        if value is None:
            continue
        if key == "status":
            value = TaskStatus(value)
        elif key == "priority":
            value = TaskPriority(value)
        if getattr(task, key) != value:
            return False
    return True

def get_all_tasks(db: JsonStore, filters: Optional[dict] = None) -> List[Task]:
    """
    Tasks matching every given filter (team_id, assignee_id, status, priority),
    sorted by priority then newest first. None values impose no constraint.
    """
    filters = filters or {}
    return sort_tasks(t for t in db.tasks if _matches(t, filters))

def get_kanban(db: JsonStore, team_id: str) -> Dict[str, List[Task]]:
    """
    The team's sorted tasks bucketed by status. Every status key is present.
    """
    board: Dict[str, List[Task]] = {s.value: [] for s in TaskStatus}
    for task in get_all_tasks(db, {"team_id": team_id}):
        board[task.status.value].append(task)
    return board

def update_task(db: JsonStore, task_id: str, data: dict) -> Optional[Task]:
    """
    Apply the fields present in data; a None value clears a nullable field.
    created_by_id and team_id are not updatable.
    """
    task = get_task(db, task_id)
    if task is None:
        return None
    changes = {k: data[k] for k in TASK_UPDATE_FIELDS if k in data}
    if not changes:
        logger.info(f"Update called but no changes for task {task_id}")
        return task
    before = {k: getattr(task, k) for k in changes}
    for field, value in changes.items():
        setattr(task, field, value)
    task.touch()
    db.save()
    diff = {k: (before[k], getattr(task, k)) for k in changes if before[k] != getattr(task, k)}
    logger.info(f"Updated task {task.id} fields: {diff}")
    return task

def delete_task(db: JsonStore, task_id: str) -> bool:
    """
    Remove a task together with all of its comments.
    """
    task = get_task(db, task_id)
    if task is None:
        return False
    db.tasks.remove(task)
    before = len(db.comments)
    db.comments = [c for c in db.comments if c.task_id != task_id]
    db.save()
    logger.info(f"Deleted task {task_id} and {before - len(db.comments)} comments")
    return True
