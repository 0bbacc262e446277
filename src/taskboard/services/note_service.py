from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.db.tables import NoteRow, column_values
from taskboard.models import NoteCategory, NoteCreate, NoteUpdate, generate_id, utcnow


async def create_note(session: AsyncSession, data: NoteCreate) -> NoteRow:
    now = utcnow()
    note = NoteRow(id=generate_id(), created_at=now, updated_at=now, **column_values(data))
    session.add(note)
    await session.commit()
    await session.refresh(note)
    return note


async def list_notes(session: AsyncSession, category: NoteCategory | None = None) -> list[NoteRow]:
    stmt = select(NoteRow)
    if category is not None:
        stmt = stmt.where(NoteRow.category == NoteCategory(category).value)
    stmt = stmt.order_by(NoteRow.created_at.desc(), NoteRow.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_note(session: AsyncSession, note_id: str) -> NoteRow | None:
    return await session.get(NoteRow, note_id)


async def update_note(session: AsyncSession, note_id: str, data: NoteUpdate) -> NoteRow | None:
    note = await session.get(NoteRow, note_id)
    if not note:
        return None
    for key, value in column_values(data, exclude_unset=True).items():
        setattr(note, key, value)
    note.updated_at = utcnow()
    await session.commit()
    await session.refresh(note)
    return note


async def delete_note(session: AsyncSession, note_id: str) -> bool:
    note = await session.get(NoteRow, note_id)
    if not note:
        return False
    await session.delete(note)
    await session.commit()
    return True


async def update_note_category(
    session: AsyncSession, note_id: str, category: NoteCategory
) -> NoteRow | None:
    note = await session.get(NoteRow, note_id)
    if not note:
        return None
    note.category = NoteCategory(category).value
    note.updated_at = utcnow()
    await session.commit()
    await session.refresh(note)
    return note
