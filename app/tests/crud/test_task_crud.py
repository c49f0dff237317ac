import time
from datetime import date

import pytest

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
from app.crud.team import create_team
from app.crud.user import create_user
from app.database import JsonStore
from app.models.task import TaskPriority, TaskStatus


@pytest.fixture
def task_factory(db: JsonStore, test_team, test_user):
    def _create(title: str = "Task", **fields):
        data = {"title": title, "team_id": test_team.id, **fields}
        return create_task(db, data, test_user.id)
    return _create


def test_create_task_defaults(db: JsonStore, test_team, test_user):
    task = create_task(db, {"title": "A", "team_id": test_team.id}, test_user.id)
    assert task.priority == TaskPriority.P3
    assert task.status == TaskStatus.NOT_STARTED
    assert task.created_by_id == test_user.id
    assert task.assignee_id is None
    assert task.description is None
    assert task.due_date is None
    assert task.created_at == task.updated_at

def test_create_task_ignores_requested_status(db: JsonStore, test_team, test_user):
    task = create_task(db, {"title": "A", "team_id": test_team.id, "status": "completed"}, test_user.id)
    assert task.status == TaskStatus.NOT_STARTED

def test_create_then_get_round_trip(db: JsonStore, test_team, test_user):
    supplied = {
        "title": "Round trip",
        "description": "all fields",
        "team_id": test_team.id,
        "assignee_id": test_user.id,
        "priority": "P1",
        "due_date": date(2026, 12, 31),
    }
    task = create_task(db, supplied, test_user.id)
    fetched = get_task(db, task.id)
    assert fetched.title == "Round trip"
    assert fetched.description == "all fields"
    assert fetched.team_id == test_team.id
    assert fetched.assignee_id == test_user.id
    assert fetched.priority == TaskPriority.P1
    assert fetched.due_date == date(2026, 12, 31)
    assert fetched.created_by_id == test_user.id
    assert fetched.id == task.id
    assert fetched.created_at == task.created_at

def test_get_task_not_found(db: JsonStore):
    assert get_task(db, "missing") is None
    assert get_task_detail(db, "missing") is None

def test_list_priority_before_recency(task_factory, db: JsonStore, test_team):
    p3 = task_factory("low", priority="P3")
    p1 = task_factory("urgent", priority="P1")
    assert [t.id for t in get_all_tasks(db, {"team_id": test_team.id})] == [p1.id, p3.id]

def test_list_same_priority_newest_first(task_factory, db: JsonStore, test_team):
    x = task_factory("X", priority="P2")
    y = task_factory("Y", priority="P2")
    assert [t.title for t in get_all_tasks(db, {"team_id": test_team.id})] == ["Y", "X"]

def test_list_filters_are_combined(db: JsonStore, test_team, test_user, task_factory):
    other_team = create_team(db, {"name": "T2"})
    bob = create_user(db, {"email": "bob@x.com", "name": "Bob", "team_id": test_team.id})
    match = task_factory("match", assignee_id=bob.id, priority="P1")
    task_factory("wrong assignee", assignee_id=test_user.id, priority="P1")
    task_factory("wrong priority", assignee_id=bob.id, priority="P2")
    create_task(db, {"title": "wrong team", "team_id": other_team.id, "assignee_id": bob.id, "priority": "P1"}, bob.id)

    result = get_all_tasks(db, {"team_id": test_team.id, "assignee_id": bob.id, "priority": "P1"})
    assert [t.id for t in result] == [match.id]
    assert len(get_all_tasks(db)) == 4
    assert len(get_all_tasks(db, {"team_id": None, "status": None})) == 4

def test_list_filter_by_status(task_factory, db: JsonStore):
    blocked = task_factory("blocked")
    task_factory("open")
    update_task(db, blocked.id, {"status": "blocked"})
    assert [t.id for t in get_all_tasks(db, {"status": TaskStatus.BLOCKED})] == [blocked.id]
    assert [t.id for t in get_all_tasks(db, {"status": "blocked"})] == [blocked.id]

def test_kanban_has_every_bucket(db: JsonStore, test_team):
    board = get_kanban(db, test_team.id)
    assert set(board) == {"not_started", "in_progress", "blocked", "completed"}
    assert all(bucket == [] for bucket in board.values())

def test_kanban_buckets_by_status_in_sorted_order(task_factory, db: JsonStore, test_team):
    a = task_factory("a", priority="P3")
    b = task_factory("b", priority="P1")
    c = task_factory("c", priority="P2")
    update_task(db, c.id, {"status": "in_progress"})

    board = get_kanban(db, test_team.id)
    assert [t.id for t in board["not_started"]] == [b.id, a.id]
    assert [t.id for t in board["in_progress"]] == [c.id]
    assert board["blocked"] == [] and board["completed"] == []

def test_update_status_only(task_factory, db: JsonStore, test_user):
    task = task_factory("keep", description="desc", assignee_id=test_user.id)
    before = task.updated_at
    time.sleep(0.01)

    updated = update_task(db, task.id, {"status": "blocked"})
    assert updated.status == TaskStatus.BLOCKED
    assert updated.title == "keep"
    assert updated.description == "desc"
    assert updated.assignee_id == test_user.id
    assert updated.updated_at > before

def test_update_null_clears_assignee(task_factory, db: JsonStore, test_user):
    task = task_factory("assigned", assignee_id=test_user.id, due_date="2026-11-01")
    update_task(db, task.id, {"assignee_id": None, "due_date": None})
    fetched = get_task(db, task.id)
    assert fetched.assignee_id is None
    assert fetched.due_date is None

def test_update_noop_does_not_touch_updated_at(task_factory, db: JsonStore):
    task = task_factory("noop")
    before = task.updated_at
    time.sleep(0.01)
    assert update_task(db, task.id, {}).updated_at == before
    assert update_task(db, task.id, {"created_by_id": "someone-else"}).created_by_id == task.created_by_id
    assert get_task(db, task.id).updated_at == before

def test_update_unknown_task(db: JsonStore):
    assert update_task(db, "missing", {"status": "blocked"}) is None

def test_delete_task_cascades_comments(task_factory, db: JsonStore, test_user):
    doomed = task_factory("doomed")
    survivor = task_factory("survivor")
    create_comment(db, doomed.id, "one", user_id=test_user.id)
    create_comment(db, doomed.id, "two")
    kept = create_comment(db, survivor.id, "stays")

    assert delete_task(db, doomed.id) is True
    assert get_task(db, doomed.id) is None
    assert get_comments(db, doomed.id) == []
    assert [c.id for c in get_comments(db, survivor.id)] == [kept.id]
    assert delete_task(db, doomed.id) is False

def test_task_detail_includes_comments_and_assignee(task_factory, db: JsonStore, test_user):
    task = task_factory("detailed", assignee_id=test_user.id)
    first = create_comment(db, task.id, "first", user_id=test_user.id)
    second = create_comment(db, task.id, "second")

    detail = get_task_detail(db, task.id)
    assert detail["id"] == task.id
    assert [c["id"] for c in detail["comments"]] == [first.id, second.id]
    assert detail["assignee"]["email"] == test_user.email

def test_task_detail_with_deleted_assignee(task_factory, db: JsonStore):
    task = task_factory("dangling", assignee_id="gone-user")
    assert get_task_detail(db, task.id)["assignee"] is None
