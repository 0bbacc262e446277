"""Tests for MemoryDataSource: CRUD contract of the fallback store."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from taskboard.errors import NotFoundError
from taskboard.models import (
    NoteCategory,
    NoteCreate,
    NoteUpdate,
    TaskCreate,
    TaskStatus,
    TaskUpdate,
    UserCreate,
    UserRole,
    UserUpdate,
)
from taskboard.sources.memory import MemoryDataSource


# ── Task Tests ────────────────────────────────────────────


@pytest.mark.asyncio
async def test_seeded_dataset(memory_source):
    assert len(await memory_source.list_tasks()) == 4
    assert len(await memory_source.list_notes()) == 3
    assert len(await memory_source.list_users()) == 3


@pytest.mark.asyncio
async def test_create_task_assigns_fresh_id_and_is_listed(memory_source):
    task = await memory_source.create_task(TaskCreate(title="Preparar demo", priority="high"))

    assert task.id
    assert task.id not in {"1", "2", "3", "4"}
    assert task.status == TaskStatus.PENDING

    tasks = await memory_source.list_tasks()
    assert len(tasks) == 5
    assert tasks[-1].id == task.id
    assert tasks[-1].title == "Preparar demo"


@pytest.mark.asyncio
async def test_created_ids_are_unique(memory_source):
    ids = {(await memory_source.create_task(TaskCreate(title=f"t{i}"))).id for i in range(20)}
    assert len(ids) == 20


@pytest.mark.asyncio
async def test_get_task(memory_source):
    task = await memory_source.get_task("3")
    assert task.title == "Revisar comentarios del cliente"
    assert task.assigned_to == "1"


@pytest.mark.asyncio
async def test_get_missing_task_raises(memory_source):
    with pytest.raises(NotFoundError, match="Task not found"):
        await memory_source.get_task("nope")


@pytest.mark.asyncio
async def test_list_tasks_by_user(memory_source):
    tasks = await memory_source.list_tasks_by_user("2")
    assert [t.id for t in tasks] == ["1"]

    assert await memory_source.list_tasks_by_user("3") == []


@pytest.mark.asyncio
async def test_update_task_applies_only_set_fields(memory_source):
    updated = await memory_source.update_task("2", TaskUpdate(title="Reunión mensual"))

    assert updated.title == "Reunión mensual"
    assert updated.priority == "high"
    assert updated.description == "Discutir el progreso del proyecto y los próximos pasos"
    assert (await memory_source.get_task("2")).title == "Reunión mensual"


@pytest.mark.asyncio
async def test_update_task_can_clear_due_date(memory_source):
    updated = await memory_source.update_task("1", TaskUpdate(due_date=None))
    assert updated.due_date is None


@pytest.mark.asyncio
async def test_update_missing_task_raises(memory_source):
    with pytest.raises(NotFoundError):
        await memory_source.update_task("missing", TaskUpdate(status="done"))


@pytest.mark.asyncio
async def test_delete_task_removes_exactly_one(memory_source):
    await memory_source.delete_task("2")

    ids = [t.id for t in await memory_source.list_tasks()]
    assert ids == ["1", "3", "4"]

    with pytest.raises(NotFoundError):
        await memory_source.delete_task("2")  # already deleted


@pytest.mark.asyncio
async def test_assign_and_unassign_task(memory_source):
    task = await memory_source.assign_task("2", "3")
    assert task.assigned_to == "3"
    assert [t.id for t in await memory_source.list_tasks_by_user("3")] == ["2"]

    task = await memory_source.assign_task("2", None)
    assert task.assigned_to is None


@pytest.mark.asyncio
async def test_assign_accepts_unknown_user(memory_source):
    """Assignees are plain references and are not validated."""
    task = await memory_source.assign_task("4", "ghost")
    assert task.assigned_to == "ghost"


@pytest.mark.asyncio
async def test_update_task_status(memory_source):
    task = await memory_source.update_task_status("4", TaskStatus.DONE)
    assert task.status == TaskStatus.DONE


@pytest.mark.asyncio
async def test_reads_return_copies(memory_source):
    task = await memory_source.get_task("1")
    task.title = "changed locally"

    assert (await memory_source.get_task("1")).title == "Completar propuesta de proyecto"


# ── Note Tests ────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_note_stamps_timestamps(memory_source):
    note = await memory_source.create_note(
        NoteCreate(title="Llamar al proveedor", category="reminder", priority="low")
    )

    assert note.id
    assert note.created_at == note.updated_at
    assert note.category == NoteCategory.REMINDER
    assert len(await memory_source.list_notes()) == 4


@pytest.mark.asyncio
async def test_list_notes_by_category(memory_source):
    notes = await memory_source.list_notes_by_category(NoteCategory.MEETING)
    assert [n.id for n in notes] == ["2"]

    assert await memory_source.list_notes_by_category("personal") == []


@pytest.mark.asyncio
async def test_update_note_bumps_updated_at(memory_source):
    before = await memory_source.get_note("1")
    updated = await memory_source.update_note("1", NoteUpdate(content="Solo modo oscuro"))

    assert updated.content == "Solo modo oscuro"
    assert updated.created_at == before.created_at
    assert updated.updated_at > before.updated_at


@pytest.mark.asyncio
async def test_update_note_category(memory_source):
    before = await memory_source.get_note("3")
    updated = await memory_source.update_note_category("3", NoteCategory.PERSONAL)

    assert updated.category == NoteCategory.PERSONAL
    assert updated.updated_at > before.updated_at


@pytest.mark.asyncio
async def test_delete_missing_note_raises(memory_source):
    with pytest.raises(NotFoundError, match="Note not found"):
        await memory_source.delete_note("404")
    assert len(await memory_source.list_notes()) == 3


# ── User Tests ────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_and_update_user(memory_source):
    user = await memory_source.create_user(
        UserCreate(name="Ana López", email="ana.lopez@ejemplo.com", department="Finanzas")
    )
    assert user.role == UserRole.USER

    updated = await memory_source.update_user(user.id, UserUpdate(position="Analista"))
    assert updated.position == "Analista"
    assert updated.department == "Finanzas"


@pytest.mark.asyncio
async def test_update_user_role(memory_source):
    user = await memory_source.update_user_role("3", UserRole.MANAGER)
    assert user.role == UserRole.MANAGER


@pytest.mark.asyncio
async def test_update_missing_user_raises(memory_source):
    with pytest.raises(NotFoundError, match="User not found"):
        await memory_source.update_user_role("99", UserRole.ADMIN)


@pytest.mark.asyncio
async def test_delete_user_leaves_assignment_dangling(memory_source):
    await memory_source.delete_user("2")

    assert len(await memory_source.list_users()) == 2
    assert (await memory_source.get_task("1")).assigned_to == "2"


# ── Store construction ────────────────────────────────────


@pytest.mark.asyncio
async def test_unseeded_store_is_empty():
    source = MemoryDataSource(seed=False)
    assert await source.list_tasks() == []
    assert await source.list_notes() == []
    assert await source.list_users() == []


@pytest.mark.asyncio
async def test_instances_do_not_share_state():
    a = MemoryDataSource()
    b = MemoryDataSource()
    await a.delete_task("1")

    assert len(await a.list_tasks()) == 3
    assert len(await b.list_tasks()) == 4


def test_seed_due_dates_are_relative_to_now():
    now = datetime.now(timezone.utc)
    tasks = MemoryDataSource().tasks
    assert now + timedelta(hours=23) < tasks[0].due_date < now + timedelta(hours=25)


def test_empty_update_is_rejected():
    with pytest.raises(ValidationError):
        TaskUpdate()
