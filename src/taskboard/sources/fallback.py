"""Remote-first data source with an in-memory fallback.

Every call tries the primary source first. When it raises ApiError the same
call is served by the fallback source instead. Nothing is remembered between
calls, so the next call tries the primary again.
"""

import logging
from typing import Any

from taskboard.errors import ApiError
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
from taskboard.sources.base import DataSource

logger = logging.getLogger(__name__)


class FallbackDataSource(DataSource):
    def __init__(self, primary: DataSource, fallback: DataSource) -> None:
        self.primary = primary
        self.fallback = fallback

    async def _call(self, operation: str, *args: Any) -> Any:
        try:
            return await getattr(self.primary, operation)(*args)
        except ApiError as e:
            logger.warning("Using fallback data for %s: %s", operation, e.message)
        return await getattr(self.fallback, operation)(*args)

    # ── Tasks ──────────────────────────────────────────────

    async def list_tasks(self) -> list[Task]:
        return await self._call("list_tasks")

    async def list_tasks_by_user(self, user_id: str) -> list[Task]:
        return await self._call("list_tasks_by_user", user_id)

    async def get_task(self, task_id: str) -> Task:
        return await self._call("get_task", task_id)

    async def create_task(self, data: TaskCreate) -> Task:
        return await self._call("create_task", data)

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        return await self._call("update_task", task_id, data)

    async def delete_task(self, task_id: str) -> None:
        await self._call("delete_task", task_id)

    async def assign_task(self, task_id: str, user_id: str | None) -> Task:
        return await self._call("assign_task", task_id, user_id)

    async def update_task_status(self, task_id: str, status: TaskStatus) -> Task:
        return await self._call("update_task_status", task_id, status)

    # ── Notes ──────────────────────────────────────────────

    async def list_notes(self) -> list[Note]:
        return await self._call("list_notes")

    async def list_notes_by_category(self, category: NoteCategory) -> list[Note]:
        return await self._call("list_notes_by_category", category)

    async def get_note(self, note_id: str) -> Note:
        return await self._call("get_note", note_id)

    async def create_note(self, data: NoteCreate) -> Note:
        return await self._call("create_note", data)

    async def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        return await self._call("update_note", note_id, data)

    async def delete_note(self, note_id: str) -> None:
        await self._call("delete_note", note_id)

    async def update_note_category(self, note_id: str, category: NoteCategory) -> Note:
        return await self._call("update_note_category", note_id, category)

    # ── Users ──────────────────────────────────────────────

    async def list_users(self) -> list[User]:
        return await self._call("list_users")

    async def get_user(self, user_id: str) -> User:
        return await self._call("get_user", user_id)

    async def create_user(self, data: UserCreate) -> User:
        return await self._call("create_user", data)

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        return await self._call("update_user", user_id, data)

    async def delete_user(self, user_id: str) -> None:
        await self._call("delete_user", user_id)

    async def update_user_role(self, user_id: str, role: UserRole) -> User:
        return await self._call("update_user_role", user_id, role)

    async def aclose(self) -> None:
        await self.primary.aclose()
        await self.fallback.aclose()
