# app/database.py

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import StoreError
from app.core.settings import settings
from app.models import Comment, Task, Team, User

logger = logging.getLogger("TeamDashboard.Store")

COLLECTIONS = ("teams", "users", "tasks", "comments")


class JsonStore:
    """
    In-memory collections of teams, users, tasks and comments, backed by a single
    JSON document that is rewritten in full after every mutation.

    Not safe for several processes sharing one document.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else None
        self.teams: List[Team] = []
        self.users: List[User] = []
        self.tasks: List[Task] = []
        self.comments: List[Comment] = []

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def persistent(self) -> bool:
        return self._path is not None

    def _clear(self) -> None:
        self.teams = []
        self.users = []
        self.tasks = []
        self.comments = []

    def load(self) -> "JsonStore":
        """
        Read the document if it exists. A missing file means an empty store;
        a corrupt one is logged and replaced by an empty store.
        """
        self._clear()
        if not self.persistent or not self._path.exists():
            logger.info(f"No store document at {self._path}, starting empty")
            return self
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError("store document is not a JSON object")
            self.teams = [Team.model_validate(item) for item in raw.get("teams", [])]
            self.users = [User.model_validate(item) for item in raw.get("users", [])]
            self.tasks = [Task.model_validate(item) for item in raw.get("tasks", [])]
            self.comments = [Comment.model_validate(item) for item in raw.get("comments", [])]
        except (OSError, ValueError, TypeError, PydanticValidationError) as e:
            logger.warning(f"Could not read store document {self._path}, starting empty: {e}")
            self._clear()
            return self
        logger.info(
            f"Loaded store from {self._path}: {len(self.teams)} teams, {len(self.users)} users, "
            f"{len(self.tasks)} tasks, {len(self.comments)} comments"
        )
        return self

    def to_document(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            name: [item.model_dump(mode="json") for item in getattr(self, name)]
            for name in COLLECTIONS
        }

    def save(self) -> None:
        """
        Overwrite the document with the current collections. No-op in in-memory mode.
        """
        if not self.persistent:
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(self.to_document(), indent=2), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write store document {self._path}: {e}")
            raise StoreError(f"Could not write store document: {e}") from e

    def reset(self) -> None:
        """
        Drop every record and persist the empty document.
        """
        self._clear()
        self.save()

    def use_in_memory_only(self) -> None:
        """
        Drop every record and stop persisting for the rest of the process.
        """
        self._clear()
        self._path = None


_store: Optional[JsonStore] = None


def init_store(path: Optional[Path] = None, in_memory: Optional[bool] = None) -> JsonStore:
    """
    Build and load the process store from settings (once); later calls return the same handle.
    """
    global _store
    if _store is not None and path is None:
        return _store
    if in_memory is None:
        in_memory = settings.IN_MEMORY_STORE
    store = JsonStore(None if in_memory else (path or settings.store_path))
    _store = store.load()
    return _store


# Dependency for FastAPI
def get_db() -> JsonStore:
    return init_store()
