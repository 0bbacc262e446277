"""Tests for note_service: backend note CRUD and category handling."""

import pytest

from taskboard.models import NoteCategory, NoteCreate, NoteUpdate
from taskboard.services.note_service import (
    create_note,
    delete_note,
    get_note,
    list_notes,
    update_note,
    update_note_category,
)


@pytest.mark.asyncio
async def test_create_note_sets_timestamps(db_session):
    note = await create_note(db_session, NoteCreate(title="Idea", category="idea"))

    assert note.id
    assert note.category == "idea"
    assert note.created_at == note.updated_at


@pytest.mark.asyncio
async def test_list_notes_by_category(db_session):
    await create_note(db_session, NoteCreate(title="Reunión", category="meeting"))
    idea = await create_note(db_session, NoteCreate(title="Idea", category="idea"))

    notes = await list_notes(db_session, category=NoteCategory.IDEA)
    assert [n.id for n in notes] == [idea.id]
    assert len(await list_notes(db_session)) == 2


@pytest.mark.asyncio
async def test_update_note_bumps_updated_at(db_session):
    note = await create_note(db_session, NoteCreate(title="Borrador"))
    created_at = note.created_at

    updated = await update_note(db_session, note.id, NoteUpdate(content="Contenido nuevo"))
    assert updated.content == "Contenido nuevo"
    assert updated.title == "Borrador"
    assert updated.updated_at >= created_at


@pytest.mark.asyncio
async def test_update_note_category(db_session):
    note = await create_note(db_session, NoteCreate(title="Recordar", category="todo"))

    updated = await update_note_category(db_session, note.id, NoteCategory.REMINDER)
    assert updated.category == "reminder"

    assert await update_note_category(db_session, "missing", NoteCategory.IDEA) is None


@pytest.mark.asyncio
async def test_delete_note(db_session):
    note = await create_note(db_session, NoteCreate(title="Temporal"))

    assert await delete_note(db_session, note.id) is True
    assert await get_note(db_session, note.id) is None
    assert await delete_note(db_session, note.id) is False
