#app/api/task.py
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Response, status
from typing import List, Optional

from app.schemas.task import (
    TaskCreate, TaskRead, TaskUpdate, TaskDetail, KanbanBoard
)
from app.schemas.comment import CommentCreate, CommentRead
from app.crud.task import (
    create_task,
    get_task,
    get_task_detail,
    get_all_tasks,
    get_kanban,
    update_task,
    delete_task,
)
from app.crud.comment import create_comment, get_comments
from app.crud.team import get_team
from app.models.task import TaskPriority, TaskStatus
from app.core.exceptions import TaskNotFound
from app.database import JsonStore, get_db

router = APIRouter(prefix="/tasks", tags=["Tasks"])

@router.post("/", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_new_task(
    data: TaskCreate,
    db: JsonStore = Depends(get_db),
    x_user_id: Optional[str] = Header(None),
):
    """
    Create a new task. The creator comes from created_by_id or the X-User-Id header.
    """
    created_by_id = data.created_by_id or x_user_id
    if not created_by_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="created_by_id is required")
    if get_team(db, data.team_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Team {data.team_id} does not exist")
    return create_task(db, data.model_dump(exclude={"created_by_id"}), created_by_id)

@router.get("/", response_model=List[TaskRead])
def list_tasks(
    team_id: Optional[str] = Query(None),
    assignee_id: Optional[str] = Query(None),
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    priority: Optional[TaskPriority] = Query(None),
    db: JsonStore = Depends(get_db),
):
    """
    Tasks matching every given filter, P1 first, newest first within a priority.
    """
    filters = {
        "team_id": team_id,
        "assignee_id": assignee_id,
        "status": task_status,
        "priority": priority,
    }
    filters = {k: v for k, v in filters.items() if v}
    return get_all_tasks(db, filters=filters)

@router.get("/kanban/{team_id}", response_model=KanbanBoard)
def team_kanban(
    team_id: str,
    db: JsonStore = Depends(get_db),
):
    """
    A team's tasks grouped by status.
    """
    return get_kanban(db, team_id)

@router.get("/{task_id}", response_model=TaskDetail)
def get_one_task(
    task_id: str,
    db: JsonStore = Depends(get_db),
):
    """
    Task by ID, with its comments.
    """
    detail = get_task_detail(db, task_id)
    if detail is None:
        raise TaskNotFound(f"Task {task_id} not found")
    return detail

@router.patch("/{task_id}", response_model=TaskRead)
def update_one_task(
    task_id: str,
    data: TaskUpdate,
    db: JsonStore = Depends(get_db),
):
    """
    Update a task. Fields left out stay as they are; null clears a nullable field.
    """
    task = update_task(db, task_id, data.model_dump(exclude_unset=True))
    if task is None:
        raise TaskNotFound(f"Task {task_id} not found")
    return task

@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_one_task(
    task_id: str,
    db: JsonStore = Depends(get_db),
):
    """
    Delete a task and its comments.
    """
    if not delete_task(db, task_id):
        raise TaskNotFound(f"Task {task_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{task_id}/comments", response_model=List[CommentRead])
def list_task_comments(
    task_id: str,
    db: JsonStore = Depends(get_db),
):
    return get_comments(db, task_id)

@router.post("/{task_id}/comments", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
def add_task_comment(
    task_id: str,
    data: CommentCreate,
    db: JsonStore = Depends(get_db),
    x_user_id: Optional[str] = Header(None),
):
    """
    Add a comment. The author comes from user_id or the X-User-Id header;
    with neither the comment is automated.
    """
    if get_task(db, task_id) is None:
        raise TaskNotFound(f"Task {task_id} not found")
    return create_comment(
        db,
        task_id,
        data.content,
        user_id=data.user_id or x_user_id,
        is_automated=data.is_automated,
    )
