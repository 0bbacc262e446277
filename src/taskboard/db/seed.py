"""Insert the demo dataset into an empty database."""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.db.tables import NoteRow, TaskRow, UserRow, column_values
from taskboard.sources.seed import demo_notes, demo_tasks, demo_users

logger = logging.getLogger(__name__)


async def seed_demo_data(session: AsyncSession) -> bool:
    """Seed users, tasks and notes. Does nothing if any user or task exists."""
    users = (await session.execute(select(func.count(UserRow.id)))).scalar() or 0
    tasks = (await session.execute(select(func.count(TaskRow.id)))).scalar() or 0
    if users or tasks:
        return False

    session.add_all(UserRow(**column_values(u)) for u in demo_users())
    session.add_all(TaskRow(**column_values(t)) for t in demo_tasks())
    session.add_all(NoteRow(**column_values(n)) for n in demo_notes())
    await session.commit()
    logger.info("Demo data seeded")
    return True
