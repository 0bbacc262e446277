"""Base data source interface."""

from abc import ABC, abstractmethod

from taskboard.models import (
    Note,
    NoteCategory,
    NoteCreate,
    NoteUpdate,
    Task,
    TaskCreate,
    TaskStatus,
    TaskUpdate,
    User,
    UserCreate,
    UserRole,
    UserUpdate,
)


class DataSource(ABC):
    """Interface shared by the remote backend and the in-memory store.

    Lookups and mutations of an unknown id raise NotFoundError (memory) or
    ApiError (remote).
    """

    # ── Tasks ──────────────────────────────────────────────

    @abstractmethod
    async def list_tasks(self) -> list[Task]: ...

    @abstractmethod
    async def list_tasks_by_user(self, user_id: str) -> list[Task]: ...

    @abstractmethod
    async def get_task(self, task_id: str) -> Task: ...

    @abstractmethod
    async def create_task(self, data: TaskCreate) -> Task: ...

    @abstractmethod
    async def update_task(self, task_id: str, data: TaskUpdate) -> Task: ...

    @abstractmethod
    async def delete_task(self, task_id: str) -> None: ...

    @abstractmethod
    async def assign_task(self, task_id: str, user_id: str | None) -> Task:
        """Assign a task to a user, or unassign it with None."""

    @abstractmethod
    async def update_task_status(self, task_id: str, status: TaskStatus) -> Task: ...

    # ── Notes ──────────────────────────────────────────────

    @abstractmethod
    async def list_notes(self) -> list[Note]: ...

    @abstractmethod
    async def list_notes_by_category(self, category: NoteCategory) -> list[Note]: ...

    @abstractmethod
    async def get_note(self, note_id: str) -> Note: ...

    @abstractmethod
    async def create_note(self, data: NoteCreate) -> Note: ...

    @abstractmethod
    async def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        """Apply changes and bump updated_at."""

    @abstractmethod
    async def delete_note(self, note_id: str) -> None: ...

    @abstractmethod
    async def update_note_category(self, note_id: str, category: NoteCategory) -> Note: ...

    # ── Users ──────────────────────────────────────────────

    @abstractmethod
    async def list_users(self) -> list[User]: ...

    @abstractmethod
    async def get_user(self, user_id: str) -> User: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User: ...

    @abstractmethod
    async def update_user(self, user_id: str, data: UserUpdate) -> User: ...

    @abstractmethod
    async def delete_user(self, user_id: str) -> None: ...

    @abstractmethod
    async def update_user_role(self, user_id: str, role: UserRole) -> User: ...

    async def aclose(self) -> None:
        """Release any held resources."""
