"""MCP server exposing the team dashboard to agents over stdio."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from app.agent.tools import call_tool
from app.core.settings import settings
from app.database import init_store

logger = logging.getLogger("TeamDashboard.AgentServer")

mcp = FastMCP(settings.MCP_SERVER_NAME)


def _call(name: str, **arguments: Any) -> Dict[str, Any]:
    payload = {k: v for k, v in arguments.items() if v is not None}
    return call_tool(init_store(), name, payload)


@mcp.tool()
def list_team_tasks(team_id: str, status: Optional[str] = None, assignee_id: Optional[str] = None) -> Dict[str, Any]:
    """Get all tasks for a team, optionally filtered by status or assignee."""
    return _call("list_team_tasks", team_id=team_id, status=status, assignee_id=assignee_id)


@mcp.tool()
def get_task_details(task_id: str) -> Dict[str, Any]:
    """Get a task with its comments and assignee."""
    return _call("get_task_details", task_id=task_id)


@mcp.tool()
def update_task_status(task_id: str, status: str) -> Dict[str, Any]:
    """Change the status of a task (not_started, in_progress, blocked, completed)."""
    return _call("update_task_status", task_id=task_id, status=status)


@mcp.tool()
def add_task_comment(task_id: str, content: str, is_automated: Optional[bool] = None) -> Dict[str, Any]:
    """Add a comment or status update to a task. Comments posted here have no human author."""
    return _call("add_task_comment", task_id=task_id, content=content, is_automated=is_automated)


@mcp.tool()
def assign_task(task_id: str, assignee_id: str) -> Dict[str, Any]:
    """Assign a task to a team member."""
    return _call("assign_task", task_id=task_id, assignee_id=assignee_id)


@mcp.tool()
def create_task(
    team_id: str,
    title: str,
    created_by_id: str,
    description: Optional[str] = None,
    assignee_id: Optional[str] = None,
    priority: Optional[str] = None,
    due_date: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a new task for the team. priority is P1, P2 or P3; due_date is YYYY-MM-DD."""
    return _call(
        "create_task",
        team_id=team_id,
        title=title,
        created_by_id=created_by_id,
        description=description,
        assignee_id=assignee_id,
        priority=priority,
        due_date=due_date,
    )


@mcp.tool()
def get_kanban(team_id: str) -> Dict[str, Any]:
    """Get a team's tasks organized by status (kanban board view)."""
    return _call("get_kanban", team_id=team_id)


@mcp.tool()
def list_team_members(team_id: str) -> Dict[str, Any]:
    """List all members of a team."""
    return _call("list_team_members", team_id=team_id)


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    store = init_store()
    logger.info(f"Team Dashboard MCP server running on stdio (store: {store.path or 'in-memory'})")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
