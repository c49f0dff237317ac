#app/crud/ordering.py
from typing import Iterable, List, TypeVar

from app.models.base import Entity
from app.models.task import Task

E = TypeVar("E", bound=Entity)

def newest_first(items: Iterable[E]) -> List[E]:
    """
    Order by created_at descending. Equal timestamps keep reverse insertion
    order, so the later insert counts as newer.
    """
    return sorted(reversed(list(items)), key=lambda e: e.created_at, reverse=True)

def oldest_first(items: Iterable[E]) -> List[E]:
    return sorted(items, key=lambda e: e.created_at)

def sort_tasks(tasks: Iterable[Task]) -> List[Task]:
    """
    Priority first (P1 before P2 before P3), then newest created first.
    """
    return sorted(newest_first(tasks), key=lambda t: t.priority.rank)
