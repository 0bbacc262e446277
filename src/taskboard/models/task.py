from datetime import datetime
from enum import Enum

from pydantic import Field

from taskboard.models.base import RecordModel, UpdateModel


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskCreate(RecordModel):
    title: str = Field(min_length=1, max_length=300)
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: Priority = Priority.MEDIUM
    due_date: datetime | None = None
    image: str | None = None  # data URL
    assigned_to: str | None = None  # user id, not validated


class Task(TaskCreate):
    id: str


class TaskUpdate(UpdateModel):
    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = None
    status: TaskStatus | None = None
    priority: Priority | None = None
    due_date: datetime | None = None
    image: str | None = None
    assigned_to: str | None = None
