import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.enums import TaskPriority, TaskState


class TaskIn(BaseModel):
    title: str = Field(..., min_length=3, max_length=120)
    priority: TaskPriority = TaskPriority.MEDIUM
    state: TaskState = TaskState.NOT_STARTED
    due_date: date
    project_id: uuid.UUID

    @field_validator("title", mode="before")
    @classmethod
    def title_strip(cls, v):
        return v.strip() if isinstance(v, str) else v


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    priority: TaskPriority
    state: TaskState
    due_date: date
    project_id: uuid.UUID
    created_at: datetime
