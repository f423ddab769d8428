from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from todo_api.models import Priority


class TodoIn(BaseModel):
    """Body for both create and full-replace update."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    due_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v

    # explicit nulls fall back to the defaults
    @field_validator("completed", mode="before")
    @classmethod
    def completed_default(cls, v):
        return False if v is None else v

    @field_validator("priority", mode="before")
    @classmethod
    def priority_default(cls, v):
        return Priority.MEDIUM if v is None else v

    # stored as UTC; naive input is read as UTC
    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class TodoOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    completed: bool
    priority: Priority
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
