"""In-memory data source: the fallback store used while the backend is down.

Records live in plain lists owned by the instance and are mutated in place,
so writes made offline remain visible to later reads in the same process.
"""

import asyncio
import logging
from typing import TypeVar

from taskboard.errors import NotFoundError
from taskboard.models import (
    Note,
    NoteCategory,
    NoteCreate,
    NoteUpdate,
    RecordModel,
    Task,
    TaskCreate,
    TaskStatus,
    TaskUpdate,
    User,
    UserCreate,
    UserRole,
    UserUpdate,
    generate_id,
    utcnow,
)
from taskboard.sources.base import DataSource
from taskboard.sources.seed import demo_notes, demo_tasks, demo_users

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=RecordModel)


def _index_of(records: list[R], record_id: str, entity: str) -> int:
    for i, record in enumerate(records):
        if record.id == record_id:
            return i
    raise NotFoundError(entity, record_id)


def _replace(records: list[R], index: int, **changes) -> R:
    # model_copy(update=...) does not validate
    current = records[index]
    updated = type(current).model_validate({**current.model_dump(), **changes})
    records[index] = updated
    return updated.model_copy()


class MemoryDataSource(DataSource):
    def __init__(
        self,
        tasks: list[Task] | None = None,
        notes: list[Note] | None = None,
        users: list[User] | None = None,
        delay_ms: int = 0,
        seed: bool = True,
    ) -> None:
        self.tasks: list[Task] = tasks if tasks is not None else (demo_tasks() if seed else [])
        self.notes: list[Note] = notes if notes is not None else (demo_notes() if seed else [])
        self.users: list[User] = users if users is not None else (demo_users() if seed else [])
        self.delay_ms = delay_ms

    async def _simulate_delay(self) -> None:
        if self.delay_ms > 0:
            await asyncio.sleep(self.delay_ms / 1000)

    # ── Tasks ──────────────────────────────────────────────

    async def list_tasks(self) -> list[Task]:
        await self._simulate_delay()
        return [t.model_copy() for t in self.tasks]

    async def list_tasks_by_user(self, user_id: str) -> list[Task]:
        await self._simulate_delay()
        return [t.model_copy() for t in self.tasks if t.assigned_to == user_id]

    async def get_task(self, task_id: str) -> Task:
        await self._simulate_delay()
        return self.tasks[_index_of(self.tasks, task_id, "Task")].model_copy()

    async def create_task(self, data: TaskCreate) -> Task:
        await self._simulate_delay()
        task = Task(**data.model_dump(), id=generate_id())
        self.tasks.append(task)
        logger.info("Fallback task created: id=%s", task.id)
        return task.model_copy()

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        await self._simulate_delay()
        index = _index_of(self.tasks, task_id, "Task")
        task = _replace(self.tasks, index, **data.changes())
        logger.info("Fallback task updated: id=%s", task_id)
        return task

    async def delete_task(self, task_id: str) -> None:
        await self._simulate_delay()
        index = _index_of(self.tasks, task_id, "Task")
        del self.tasks[index]
        logger.info("Fallback task deleted: id=%s", task_id)

    async def assign_task(self, task_id: str, user_id: str | None) -> Task:
        await self._simulate_delay()
        index = _index_of(self.tasks, task_id, "Task")
        task = _replace(self.tasks, index, assigned_to=user_id)
        logger.info("Fallback task %s assigned to %s", task_id, user_id)
        return task

    async def update_task_status(self, task_id: str, status: TaskStatus) -> Task:
        await self._simulate_delay()
        index = _index_of(self.tasks, task_id, "Task")
        return _replace(self.tasks, index, status=status)

    # ── Notes ──────────────────────────────────────────────

    async def list_notes(self) -> list[Note]:
        await self._simulate_delay()
        return [n.model_copy() for n in self.notes]

    async def list_notes_by_category(self, category: NoteCategory) -> list[Note]:
        await self._simulate_delay()
        category = NoteCategory(category)
        return [n.model_copy() for n in self.notes if n.category == category]

    async def get_note(self, note_id: str) -> Note:
        await self._simulate_delay()
        return self.notes[_index_of(self.notes, note_id, "Note")].model_copy()

    async def create_note(self, data: NoteCreate) -> Note:
        await self._simulate_delay()
        now = utcnow()
        note = Note(**data.model_dump(), id=generate_id(), created_at=now, updated_at=now)
        self.notes.append(note)
        logger.info("Fallback note created: id=%s", note.id)
        return note.model_copy()

    async def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        await self._simulate_delay()
        index = _index_of(self.notes, note_id, "Note")
        note = _replace(self.notes, index, **data.changes(), updated_at=utcnow())
        logger.info("Fallback note updated: id=%s", note_id)
        return note

    async def delete_note(self, note_id: str) -> None:
        await self._simulate_delay()
        index = _index_of(self.notes, note_id, "Note")
        del self.notes[index]
        logger.info("Fallback note deleted: id=%s", note_id)

    async def update_note_category(self, note_id: str, category: NoteCategory) -> Note:
        await self._simulate_delay()
        index = _index_of(self.notes, note_id, "Note")
        return _replace(self.notes, index, category=category, updated_at=utcnow())

    # ── Users ──────────────────────────────────────────────

    async def list_users(self) -> list[User]:
        await self._simulate_delay()
        return [u.model_copy() for u in self.users]

    async def get_user(self, user_id: str) -> User:
        await self._simulate_delay()
        return self.users[_index_of(self.users, user_id, "User")].model_copy()

    async def create_user(self, data: UserCreate) -> User:
        await self._simulate_delay()
        user = User(**data.model_dump(), id=generate_id())
        self.users.append(user)
        logger.info("Fallback user created: id=%s", user.id)
        return user.model_copy()

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        await self._simulate_delay()
        index = _index_of(self.users, user_id, "User")
        user = _replace(self.users, index, **data.changes())
        logger.info("Fallback user updated: id=%s", user_id)
        return user

    async def delete_user(self, user_id: str) -> None:
        await self._simulate_delay()
        index = _index_of(self.users, user_id, "User")
        del self.users[index]
        logger.info("Fallback user deleted: id=%s", user_id)

    async def update_user_role(self, user_id: str, role: UserRole) -> User:
        await self._simulate_delay()
        index = _index_of(self.users, user_id, "User")
        return _replace(self.users, index, role=role)
