from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.db.tables import TaskRow, column_values
from taskboard.models import TaskCreate, TaskStatus, TaskUpdate, generate_id


async def create_task(session: AsyncSession, data: TaskCreate) -> TaskRow:
    task = TaskRow(id=generate_id(), **column_values(data))
    session.add(task)
    await session.commit()
    await session.refresh(task)
    return task


async def list_tasks(session: AsyncSession, assigned_to: str | None = None) -> list[TaskRow]:
    """List tasks in creation order, optionally only those assigned to a user."""
    stmt = select(TaskRow)
    if assigned_to is not None:
        stmt = stmt.where(TaskRow.assigned_to == assigned_to)
    stmt = stmt.order_by(TaskRow.created_at, TaskRow.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_task(session: AsyncSession, task_id: str) -> TaskRow | None:
    return await session.get(TaskRow, task_id)


async def update_task(session: AsyncSession, task_id: str, data: TaskUpdate) -> TaskRow | None:
    task = await session.get(TaskRow, task_id)
    if not task:
        return None
    for key, value in column_values(data, exclude_unset=True).items():
        setattr(task, key, value)
    await session.commit()
    await session.refresh(task)
    return task


async def delete_task(session: AsyncSession, task_id: str) -> bool:
    task = await session.get(TaskRow, task_id)
    if not task:
        return False
    await session.delete(task)
    await session.commit()
    return True


async def assign_task(session: AsyncSession, task_id: str, user_id: str | None) -> TaskRow | None:
    task = await session.get(TaskRow, task_id)
    if not task:
        return None
    task.assigned_to = user_id
    await session.commit()
    await session.refresh(task)
    return task


async def update_task_status(
    session: AsyncSession, task_id: str, status: TaskStatus
) -> TaskRow | None:
    task = await session.get(TaskRow, task_id)
    if not task:
        return None
    task.status = TaskStatus(status).value
    await session.commit()
    await session.refresh(task)
    return task
