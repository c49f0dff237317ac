"""Agent tool operations over the task services.

Each tool validates its arguments, calls one service path and returns plain
JSON-ready data. ``call_tool`` wraps every outcome in a tagged payload:
``{"ok": True, "result": ...}`` or ``{"ok": False, "error": "..."}``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from app.core.exceptions import (
    BaseAppException,
    StoreError,
    TaskNotFound,
    TeamNotFound,
    ValidationError,
)
from app.core.validation import (
    validate,
    validate_comment_create,
    validate_task_create,
    validate_task_update,
)
from app.crud.comment import create_comment
from app.crud.task import (
    create_task,
    get_all_tasks,
    get_kanban,
    get_task,
    get_task_detail,
    update_task,
)
from app.crud.team import get_team
from app.crud.user import get_users
from app.database import JsonStore
from app.models.task import TaskStatus
from app.schemas.task import KanbanBoard, TaskDetail, TaskRead
from app.schemas.user import UserRead

logger = logging.getLogger("TeamDashboard.AgentTools")


class ListTeamTasksArgs(BaseModel):
    team_id: str = Field(..., description="The team ID")
    status: Optional[TaskStatus] = Field(None, description="Filter by status")
    assignee_id: Optional[str] = Field(None, description="Filter by assignee")


class TaskIdArgs(BaseModel):
    task_id: str = Field(..., description="The task ID")


class TeamIdArgs(BaseModel):
    team_id: str = Field(..., description="The team ID")


def _parse(schema: type, arguments: Any) -> Any:
    result = validate(schema, arguments)
    if not result.ok:
        raise ValidationError(result.message)
    return result.value


def _task_changes(arguments: Dict[str, Any], *fields: str) -> Dict[str, Any]:
    """The named task fields, all required, checked as a partial task update."""
    for name in fields:
        if arguments.get(name) is None:
            raise ValidationError(f"{name}: field required")
    result = validate_task_update({name: arguments[name] for name in fields})
    if not result.ok:
        raise ValidationError(result.message)
    return result.data(exclude_unset=True)


def _dump_tasks(tasks) -> List[Dict[str, Any]]:
    return [TaskRead.model_validate(t, from_attributes=True).model_dump(mode="json") for t in tasks]


def list_team_tasks(db: JsonStore, arguments: Any) -> List[Dict[str, Any]]:
    args = _parse(ListTeamTasksArgs, arguments)
    tasks = get_all_tasks(db, {"team_id": args.team_id, "status": args.status, "assignee_id": args.assignee_id})
    return _dump_tasks(tasks)


def get_task_details(db: JsonStore, arguments: Any) -> Dict[str, Any]:
    args = _parse(TaskIdArgs, arguments)
    detail = get_task_detail(db, args.task_id)
    if detail is None:
        raise TaskNotFound(f"Task {args.task_id} not found")
    return TaskDetail.model_validate(detail).model_dump(mode="json")


def update_task_status(db: JsonStore, arguments: Any) -> Dict[str, Any]:
    args = _parse(TaskIdArgs, arguments)
    task = update_task(db, args.task_id, _task_changes(arguments, "status"))
    if task is None:
        raise TaskNotFound(f"Task {args.task_id} not found")
    return {"message": f"Task status updated to {task.status.value}", "task": _dump_tasks([task])[0]}


def add_task_comment(db: JsonStore, arguments: Any) -> Dict[str, Any]:
    args = _parse(TaskIdArgs, arguments)
    checked = validate_comment_create({k: arguments[k] for k in ("content", "is_automated") if k in arguments})
    if not checked.ok:
        raise ValidationError(checked.message)
    if get_task(db, args.task_id) is None:
        raise TaskNotFound(f"Task {args.task_id} not found")
    comment = create_comment(db, args.task_id, checked.value.content, is_automated=checked.value.is_automated)
    return {"message": f"Comment added with ID: {comment.id}", "comment_id": comment.id}


def assign_task(db: JsonStore, arguments: Any) -> Dict[str, Any]:
    args = _parse(TaskIdArgs, arguments)
    changes = _task_changes(arguments, "assignee_id")
    task = update_task(db, args.task_id, changes)
    if task is None:
        raise TaskNotFound(f"Task {args.task_id} not found")
    return {"message": f"Task assigned to user {changes['assignee_id']}", "task": _dump_tasks([task])[0]}


def create_task_tool(db: JsonStore, arguments: Any) -> Dict[str, Any]:
    result = validate_task_create(arguments)
    if not result.ok:
        raise ValidationError(result.message)
    data = result.value
    if get_team(db, data.team_id) is None:
        raise TeamNotFound(f"Team {data.team_id} not found")
    task = create_task(db, data.model_dump(exclude={"created_by_id"}), data.created_by_id)
    return _dump_tasks([task])[0]


def get_kanban_tool(db: JsonStore, arguments: Any) -> Dict[str, Any]:
    args = _parse(TeamIdArgs, arguments)
    return KanbanBoard.model_validate(
        {status: _dump_tasks(tasks) for status, tasks in get_kanban(db, args.team_id).items()}
    ).model_dump(mode="json")


def list_team_members(db: JsonStore, arguments: Any) -> List[Dict[str, Any]]:
    args = _parse(TeamIdArgs, arguments)
    return [
        UserRead.model_validate(u, from_attributes=True).model_dump(mode="json")
        for u in get_users(db, team_id=args.team_id)
    ]


ToolHandler = Callable[[JsonStore, Any], Any]

TOOLS: Dict[str, ToolHandler] = {
    "list_team_tasks": list_team_tasks,
    "get_task_details": get_task_details,
    "update_task_status": update_task_status,
    "add_task_comment": add_task_comment,
    "assign_task": assign_task,
    "create_task": create_task_tool,
    "get_kanban": get_kanban_tool,
    "list_team_members": list_team_members,
}


def call_tool(db: JsonStore, name: str, arguments: Any = None) -> Dict[str, Any]:
    """Run one tool and report the outcome as a tagged payload."""
    handler = TOOLS.get(name)
    if handler is None:
        return {"ok": False, "error": f"Unknown tool: {name}"}
    try:
        result = handler(db, arguments if arguments is not None else {})
    except StoreError:
        raise
    except BaseAppException as e:
        logger.info(f"Tool {name} failed: {e}")
        return {"ok": False, "error": str(e)}
    return {"ok": True, "result": result}
