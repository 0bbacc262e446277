from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.db.tables import UserRow, column_values
from taskboard.models import UserCreate, UserRole, UserUpdate, generate_id


async def create_user(session: AsyncSession, data: UserCreate) -> UserRow:
    user = UserRow(id=generate_id(), **column_values(data))
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def list_users(session: AsyncSession) -> list[UserRow]:
    stmt = select(UserRow).order_by(UserRow.created_at, UserRow.id)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_user(session: AsyncSession, user_id: str) -> UserRow | None:
    return await session.get(UserRow, user_id)


async def update_user(session: AsyncSession, user_id: str, data: UserUpdate) -> UserRow | None:
    user = await session.get(UserRow, user_id)
    if not user:
        return None
    for key, value in column_values(data, exclude_unset=True).items():
        setattr(user, key, value)
    await session.commit()
    await session.refresh(user)
    return user


async def delete_user(session: AsyncSession, user_id: str) -> bool:
    """Delete a user. Tasks assigned to them keep the dangling reference."""
    user = await session.get(UserRow, user_id)
    if not user:
        return False
    await session.delete(user)
    await session.commit()
    return True


async def update_user_role(session: AsyncSession, user_id: str, role: UserRole) -> UserRow | None:
    user = await session.get(UserRow, user_id)
    if not user:
        return None
    user.role = UserRole(role).value
    await session.commit()
    await session.refresh(user)
    return user
