"""
Base class for every entity kept in the store.

Use it as the base when describing an entity:
    from app.models.base import Entity
"""

import uuid
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def as_utc(value: datetime) -> datetime:
    """Timestamps without an offset are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class Entity(BaseModel):
    """
    Entity — identity plus creation timestamp, shared by all stored records.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_id, description="UUID4 identifier")
    created_at: UtcDatetime = Field(default_factory=utcnow, description="Creation time (UTC), immutable")


class MutableEntity(Entity):
    """
    MutableEntity — an entity that is updated in place and tracks updated_at.
    A new entity starts with updated_at equal to created_at.
    """
    updated_at: UtcDatetime = Field(
        default_factory=lambda data: data.get("created_at") or utcnow(),
        description="Last mutation time (UTC)",
    )

    def touch(self) -> None:
        self.updated_at = utcnow()
