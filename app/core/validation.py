# app/core/validation.py
"""
Boundary input validation.

Every function here checks a raw payload against one of the request schemas
and returns a ValidationResult instead of raising, so callers decide how a
rejection is reported (HTTP 400, a tool failure payload, ...).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.schemas.comment import CommentCreate
from app.schemas.task import TaskCreate, TaskUpdate

M = TypeVar("M", bound=BaseModel)


@dataclass
class ValidationResult(Generic[M]):
    ok: bool
    value: Optional[M] = None
    errors: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return "; ".join(self.errors)

    def data(self, exclude_unset: bool = False) -> Dict[str, Any]:
        """
        The validated payload as a dict; exclude_unset keeps only the fields that were sent.
        """
        if self.value is None:
            return {}
        return self.value.model_dump(exclude_unset=exclude_unset)


def _format_errors(exc: PydanticValidationError) -> List[str]:
    errors = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())) or "payload"
        errors.append(f"{location}: {err.get('msg')}")
    return errors


def validate(schema: Type[M], payload: Any) -> ValidationResult[M]:
    if not isinstance(payload, dict):
        return ValidationResult(ok=False, errors=["payload: expected an object"])
    try:
        return ValidationResult(ok=True, value=schema.model_validate(payload))
    except PydanticValidationError as e:
        return ValidationResult(ok=False, errors=_format_errors(e))


def validate_task_create(payload: Any) -> ValidationResult[TaskCreate]:
    """
    Task creation additionally needs a creator.
    """
    result = validate(TaskCreate, payload)
    if result.ok and not result.value.created_by_id:
        return ValidationResult(ok=False, errors=["created_by_id: field required"])
    return result


def validate_task_update(payload: Any) -> ValidationResult[TaskUpdate]:
    return validate(TaskUpdate, payload)


def validate_comment_create(payload: Any) -> ValidationResult[CommentCreate]:
    return validate(CommentCreate, payload)
