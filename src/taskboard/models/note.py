from datetime import datetime
from enum import Enum

from pydantic import Field

from taskboard.models.base import RecordModel, UpdateModel
from taskboard.models.task import Priority


class NoteCategory(str, Enum):
    TODO = "todo"
    IDEA = "idea"
    REMINDER = "reminder"
    MEETING = "meeting"
    PERSONAL = "personal"


class NoteCreate(RecordModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = ""
    category: NoteCategory = NoteCategory.TODO
    priority: Priority = Priority.MEDIUM


class Note(NoteCreate):
    id: str
    created_at: datetime
    updated_at: datetime


class NoteUpdate(UpdateModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = None
    category: NoteCategory | None = None
    priority: Priority | None = None
