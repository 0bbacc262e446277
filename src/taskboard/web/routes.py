"""REST endpoints for tasks, notes and users."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.db.database import get_session
from taskboard.db.tables import NoteRow, TaskRow, UserRow
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
)
from taskboard.services import note_service, task_service, user_service

logger = logging.getLogger(__name__)

tasks_router = APIRouter(prefix="/api/tasks", tags=["tasks"])
notes_router = APIRouter(prefix="/api/notes", tags=["notes"])
users_router = APIRouter(prefix="/api/users", tags=["users"])
status_router = APIRouter(prefix="/api", tags=["status"])


class TaskAssignment(RecordModel):
    assigned_to: str | None = None


class TaskStatusChange(RecordModel):
    status: TaskStatus


class NoteCategoryChange(RecordModel):
    category: NoteCategory


class UserRoleChange(RecordModel):
    role: UserRole


def _not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Tasks ──────────────────────────────────────────────────


@tasks_router.get("", response_model=list[Task])
async def list_tasks(session: AsyncSession = Depends(get_session)):
    return [Task.model_validate(t) for t in await task_service.list_tasks(session)]


@tasks_router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(data: TaskCreate, session: AsyncSession = Depends(get_session)):
    task = await task_service.create_task(session, data)
    logger.info("Task created: id=%s", task.id)
    return Task.model_validate(task)


@tasks_router.get("/user/{user_id}", response_model=list[Task])
async def list_tasks_by_user(user_id: str, session: AsyncSession = Depends(get_session)):
    tasks = await task_service.list_tasks(session, assigned_to=user_id)
    return [Task.model_validate(t) for t in tasks]


@tasks_router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, session: AsyncSession = Depends(get_session)):
    task = await task_service.get_task(session, task_id)
    if not task:
        raise _not_found("Task")
    return Task.model_validate(task)


@tasks_router.put("/{task_id}", response_model=Task)
async def update_task(task_id: str, data: TaskUpdate, session: AsyncSession = Depends(get_session)):
    task = await task_service.update_task(session, task_id, data)
    if not task:
        raise _not_found("Task")
    return Task.model_validate(task)


@tasks_router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, session: AsyncSession = Depends(get_session)):
    if not await task_service.delete_task(session, task_id):
        raise _not_found("Task")
    logger.info("Task deleted: id=%s", task_id)
    return _no_content()


@tasks_router.patch("/{task_id}/assign", response_model=Task)
async def assign_task(
    task_id: str, data: TaskAssignment, session: AsyncSession = Depends(get_session)
):
    task = await task_service.assign_task(session, task_id, data.assigned_to)
    if not task:
        raise _not_found("Task")
    return Task.model_validate(task)


@tasks_router.put("/{task_id}/status", response_model=Task)
async def update_task_status(
    task_id: str, data: TaskStatusChange, session: AsyncSession = Depends(get_session)
):
    task = await task_service.update_task_status(session, task_id, data.status)
    if not task:
        raise _not_found("Task")
    return Task.model_validate(task)


# ── Notes ──────────────────────────────────────────────────


@notes_router.get("", response_model=list[Note])
async def list_notes(session: AsyncSession = Depends(get_session)):
    return [Note.model_validate(n) for n in await note_service.list_notes(session)]


@notes_router.post("", response_model=Note, status_code=status.HTTP_201_CREATED)
async def create_note(data: NoteCreate, session: AsyncSession = Depends(get_session)):
    note = await note_service.create_note(session, data)
    logger.info("Note created: id=%s", note.id)
    return Note.model_validate(note)


@notes_router.get("/category/{category}", response_model=list[Note])
async def list_notes_by_category(
    category: NoteCategory, session: AsyncSession = Depends(get_session)
):
    notes = await note_service.list_notes(session, category=category)
    return [Note.model_validate(n) for n in notes]


@notes_router.get("/{note_id}", response_model=Note)
async def get_note(note_id: str, session: AsyncSession = Depends(get_session)):
    note = await note_service.get_note(session, note_id)
    if not note:
        raise _not_found("Note")
    return Note.model_validate(note)


@notes_router.put("/{note_id}", response_model=Note)
async def update_note(note_id: str, data: NoteUpdate, session: AsyncSession = Depends(get_session)):
    note = await note_service.update_note(session, note_id, data)
    if not note:
        raise _not_found("Note")
    return Note.model_validate(note)


@notes_router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, session: AsyncSession = Depends(get_session)):
    if not await note_service.delete_note(session, note_id):
        raise _not_found("Note")
    logger.info("Note deleted: id=%s", note_id)
    return _no_content()


@notes_router.put("/{note_id}/category", response_model=Note)
async def update_note_category(
    note_id: str, data: NoteCategoryChange, session: AsyncSession = Depends(get_session)
):
    note = await note_service.update_note_category(session, note_id, data.category)
    if not note:
        raise _not_found("Note")
    return Note.model_validate(note)


# ── Users ──────────────────────────────────────────────────


@users_router.get("", response_model=list[User])
async def list_users(session: AsyncSession = Depends(get_session)):
    return [User.model_validate(u) for u in await user_service.list_users(session)]


@users_router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreate, session: AsyncSession = Depends(get_session)):
    user = await user_service.create_user(session, data)
    logger.info("User created: id=%s", user.id)
    return User.model_validate(user)


@users_router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, session: AsyncSession = Depends(get_session)):
    user = await user_service.get_user(session, user_id)
    if not user:
        raise _not_found("User")
    return User.model_validate(user)


@users_router.put("/{user_id}", response_model=User)
async def update_user(user_id: str, data: UserUpdate, session: AsyncSession = Depends(get_session)):
    user = await user_service.update_user(session, user_id, data)
    if not user:
        raise _not_found("User")
    return User.model_validate(user)


@users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, session: AsyncSession = Depends(get_session)):
    if not await user_service.delete_user(session, user_id):
        raise _not_found("User")
    logger.info("User deleted: id=%s", user_id)
    return _no_content()


@users_router.put("/{user_id}/role", response_model=User)
async def update_user_role(
    user_id: str, data: UserRoleChange, session: AsyncSession = Depends(get_session)
):
    user = await user_service.update_user_role(session, user_id, data.role)
    if not user:
        raise _not_found("User")
    return User.model_validate(user)


# ── Status ─────────────────────────────────────────────────


@status_router.get("/status")
async def get_status(session: AsyncSession = Depends(get_session)):
    """Uptime and record counts per entity."""
    from taskboard.web.app import uptime_seconds

    tasks_total = (await session.execute(select(func.count(TaskRow.id)))).scalar() or 0
    tasks_done = (
        await session.execute(
            select(func.count(TaskRow.id)).where(TaskRow.status == TaskStatus.DONE.value)
        )
    ).scalar() or 0
    notes = (await session.execute(select(func.count(NoteRow.id)))).scalar() or 0
    users = (await session.execute(select(func.count(UserRow.id)))).scalar() or 0

    seconds = uptime_seconds()
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return {
        "uptime": f"{hours}h {minutes}m {secs}s",
        "uptime_seconds": seconds,
        "tasks": {"total": tasks_total, "done": tasks_done},
        "notes": notes,
        "users": users,
    }
