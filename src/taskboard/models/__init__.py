from taskboard.models.base import RecordModel, UpdateModel, generate_id, utcnow
from taskboard.models.task import Priority, Task, TaskCreate, TaskStatus, TaskUpdate
from taskboard.models.note import Note, NoteCategory, NoteCreate, NoteUpdate
from taskboard.models.user import User, UserCreate, UserRole, UserUpdate

__all__ = [
    "RecordModel",
    "UpdateModel",
    "generate_id",
    "utcnow",
    "Priority",
    "Task",
    "TaskCreate",
    "TaskStatus",
    "TaskUpdate",
    "Note",
    "NoteCategory",
    "NoteCreate",
    "NoteUpdate",
    "User",
    "UserCreate",
    "UserRole",
    "UserUpdate",
]
