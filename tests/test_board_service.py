"""Tests for BoardService on top of the fallback store."""

import pytest

from taskboard.models import TaskStatus, UserCreate, UserUpdate
from taskboard.services.board_service import BoardService
from taskboard.services.messages import GENERIC_ERROR, failure_message
from taskboard.sources.memory import MemoryDataSource


@pytest.fixture
def board(memory_source):
    return BoardService(memory_source)


@pytest.mark.asyncio
async def test_complete_task(board, memory_source):
    task = await board.complete_task("2")

    assert task.status == TaskStatus.DONE
    assert (await memory_source.get_task("2")).status == TaskStatus.DONE


@pytest.mark.asyncio
async def test_assign_task(board):
    task = await board.assign_task("4", "3")
    assert task.assigned_to == "3"


@pytest.mark.asyncio
async def test_task_with_assignee(board):
    task, user = await board.task_with_assignee("1")
    assert task.id == "1"
    assert user.name == "María García"


@pytest.mark.asyncio
async def test_task_with_assignee_unassigned(board):
    _, user = await board.task_with_assignee("2")
    assert user is None


@pytest.mark.asyncio
async def test_task_with_unknown_assignee_resolves_to_none(board):
    await board.assign_task("2", "ghost")

    task, user = await board.task_with_assignee("2")
    assert task.assigned_to == "ghost"
    assert user is None


@pytest.mark.asyncio
async def test_assignment_overview(board, memory_source):
    await memory_source.delete_user("2")  # task 1 keeps a dangling reference

    overview = await board.assignment_overview()

    assert set(overview) == {"1", "3", None}
    assert [t.id for t in overview["1"]] == ["3"]
    assert overview["3"] == []
    assert [t.id for t in overview[None]] == ["1", "2", "4"]


@pytest.mark.asyncio
async def test_save_user_creates_then_updates(board, memory_source):
    created = await board.save_user(
        None, UserCreate(name="Lucía Torres", email="lucia.torres@ejemplo.com")
    )
    assert len(await memory_source.list_users()) == 4

    updated = await board.save_user(created.id, UserUpdate(department="Soporte"))
    assert updated.id == created.id
    assert updated.department == "Soporte"


@pytest.mark.asyncio
async def test_save_user_requires_create_payload_without_id(board):
    with pytest.raises(TypeError):
        await board.save_user(None, UserUpdate(name="Nadie"))


@pytest.mark.asyncio
async def test_task_counts(board):
    await board.complete_task("4")

    counts = await board.task_counts()
    assert counts == {
        "total": 4,
        "pending": 2,
        "in-progress": 1,
        "done": 1,
        "high_priority": 2,
    }


@pytest.mark.asyncio
async def test_task_counts_empty_board():
    board = BoardService(MemoryDataSource(seed=False))

    counts = await board.task_counts()
    assert counts == {"total": 0, "pending": 0, "in-progress": 0, "done": 0, "high_priority": 0}


def test_failure_messages():
    assert failure_message("load", "task") == "No se pudieron cargar las tareas."
    assert failure_message("save", "note") == "No se pudo guardar la nota."
    assert failure_message("delete", "user") == "No se pudo eliminar el usuario."
    assert failure_message("explode", "task") == GENERIC_ERROR
